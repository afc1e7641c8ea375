#!/usr/bin/env python3

"""ObjC declaration text for classes, protocols and categories.

Produces the ``@interface``/``@protocol`` body that the header assembler
places between the import block and the closing include guard.
"""

from collections.abc import Iterable

from ...models.objc import (
    CategoryDescriptor,
    ClassDescriptor,
    MethodInfo,
    PropertyInfo,
    ProtocolDescriptor,
)
from ..parsing.type_encoding_decoder import format_ivar_declaration

UNRESOLVED_CLASS = "__UNRESOLVED__"


def _adopted(protocols: Iterable[str]) -> str:
    names = list(protocols)
    return f" <{', '.join(names)}>" if names else ""


def _typed(type_name: str, name: str) -> str:
    type_name = type_name.strip() or "id"
    separator = "" if type_name.endswith("*") else " "
    return f"{type_name}{separator}{name}"


def render_property(prop: PropertyInfo) -> str:
    """Render ``@property (attrs) Type name;``."""
    attributes = f"({', '.join(prop.attributes)}) " if prop.attributes else ""
    return f"@property {attributes}{_typed(prop.type_name, prop.name)};"


def render_method(method: MethodInfo, is_class_method: bool = False) -> str:
    """Render a method prototype such as ``- (void)setFrame:(CGRect)arg0;``.

    Explicit arguments are paired with selector components in order; when
    the argument types are missing the component is emitted without a type.
    """
    marker = "+" if is_class_method else "-"
    prototype = f"{marker} ({method.return_type or 'id'})"
    arguments = method.explicit_argument_types

    if ":" not in method.name:
        return f"{prototype}{method.name};"

    segments = []
    for index, component in enumerate(method.name.split(":")[:-1]):
        if index < len(arguments):
            segments.append(f"{component}:({arguments[index]})arg{index}")
        else:
            segments.append(f"{component}:arg{index}")
    return f"{prototype}{' '.join(segments)};"


def _method_block(
    title: str, methods: Iterable[MethodInfo], is_class_method: bool
) -> list[str]:
    rendered = [render_method(method, is_class_method) for method in methods]
    if not rendered:
        return []
    return ["", f"/* {title} */", *rendered]


def _property_block(properties: Iterable[PropertyInfo]) -> list[str]:
    rendered = [render_property(prop) for prop in properties]
    return ["", *rendered] if rendered else []


class DeclarationRenderer:
    """Renders descriptors as ObjC declarations.

    All methods are static; output depends only on the descriptor.
    """

    @staticmethod
    def render_class(cls: ClassDescriptor) -> str:
        """Render an ``@interface`` block with ivars, properties and methods."""
        superclass = f" : {cls.superclass}" if cls.superclass else ""
        header = f"@interface {cls.name}{superclass}{_adopted(cls.protocols)}"
        lines: list[str] = []

        if cls.ivars:
            lines.append(header + " {")
            lines.append("  /* instance variables */")
            for ivar in cls.ivars:
                lines.append(f"  {format_ivar_declaration(ivar.type_encoding, ivar.name)};")
            lines.append("}")
        else:
            lines.append(header)

        lines.extend(_property_block(cls.properties))
        lines.extend(_method_block("class methods", cls.class_methods, True))
        lines.extend(_method_block("instance methods", cls.instance_methods, False))
        lines.extend(["", "@end"])
        return "\n".join(lines) + "\n"

    @staticmethod
    def render_protocol(proto: ProtocolDescriptor) -> str:
        """Render a ``@protocol`` block, required members first."""
        lines = [f"@protocol {proto.name}{_adopted(proto.protocols)}"]
        lines.extend(_property_block(proto.properties))
        lines.extend(_method_block("class methods", proto.class_methods, True))
        lines.extend(_method_block("instance methods", proto.instance_methods, False))

        if proto.optional_class_methods or proto.optional_instance_methods:
            lines.extend(["", "@optional"])
            lines.extend(
                _method_block("class methods", proto.optional_class_methods, True)
            )
            lines.extend(
                _method_block("instance methods", proto.optional_instance_methods, False)
            )

        lines.extend(["", "@end"])
        return "\n".join(lines) + "\n"

    @staticmethod
    def render_category(category: CategoryDescriptor) -> str:
        """Render an ``@interface Class (Category)`` block."""
        class_name = category.class_name or UNRESOLVED_CLASS
        lines = [f"@interface {class_name} ({category.name}){_adopted(category.protocols)}"]
        lines.extend(_property_block(category.properties))
        lines.extend(_method_block("class methods", category.class_methods, True))
        lines.extend(_method_block("instance methods", category.instance_methods, False))
        lines.extend(["", "@end"])
        return "\n".join(lines) + "\n"
