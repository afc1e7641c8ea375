#!/usr/bin/env python3

"""Per-entity import reconstruction from type encodings.

Each class, protocol and category is walked for the names it references.
A reference to an entity defined in the same binary becomes a local
``#include``; anything else becomes an ``@class``/``@protocol`` forward
declaration. Results are normalized against the Foundation index before
they are stored.
"""

from collections.abc import Iterable, Iterator

from ....infrastructure.config import get_config
from ....infrastructure.logging import get_logger
from ...models.objc import (
    FIRST_EXPLICIT_ARGUMENT,
    CategoryDescriptor,
    ClassDescriptor,
    FoundationIndex,
    Imports,
    MethodInfo,
    ModuleImports,
    ProtocolDescriptor,
    local_class_header,
    local_protocol_header,
)
from ..parsing import EncodingStyle, ReferenceKind, TypeEncodingClassifier, TypeReference

logger = get_logger(__name__)


def method_argument_indices(count: int) -> Iterator[int]:
    """Yield the argument indices walked for a method with ``count`` arguments.

    Index 0 (the receiver) is visited, then the walk jumps straight to the
    first explicit argument; index 1 (the selector) is never classified.
    """
    index = 0
    while index < count:
        yield index
        index = FIRST_EXPLICIT_ARGUMENT if index == 0 else index + 1


class DependencyResolver:
    """Compute normalized Imports for the entities of one binary.

    The resolver holds no mutable state: the Foundation index and the
    binary's own class and protocol names are passed in at construction.
    """

    def __init__(
        self,
        foundation: FoundationIndex,
        class_names: Iterable[str],
        protocol_names: Iterable[str],
    ):
        """Initialize dependency resolver.

        Args:
            foundation: Names suppressed as always available
            class_names: Classes defined in the binary being processed
            protocol_names: Protocols defined in the binary being processed
        """
        config = get_config()
        self.foundation = foundation
        self.class_names = frozenset(class_names)
        self.protocol_names = frozenset(protocol_names)
        self.root_class = config["ROOT_CLASS"]
        self.root_framework = config["ROOT_FRAMEWORK"]

    def resolve_module(
        self,
        classes: Iterable[ClassDescriptor],
        protocols: Iterable[ProtocolDescriptor],
        categories: Iterable[CategoryDescriptor],
    ) -> ModuleImports:
        """Compute imports for every entity of a binary."""
        module = ModuleImports()
        for cls in classes:
            module.classes[cls.name] = self.resolve_class(cls)
        for proto in protocols:
            module.protocols[proto.identity] = self.resolve_protocol(proto)
        for category in categories:
            module.categories[category.header_stem] = self.resolve_category(category)

        logger.debug(
            f"Resolved imports for {len(module.classes)} classes, "
            f"{len(module.protocols)} protocols, {len(module.categories)} categories"
        )
        return module

    def resolve_class(self, cls: ClassDescriptor) -> Imports:
        """Walk superclass, protocols, ivars, properties and method arguments."""
        imports = Imports()

        if cls.superclass == self.root_class:
            imports.add_framework(self.root_framework)

        for protocol_name in cls.protocols:
            self._add_protocol(imports, protocol_name)

        for ivar in cls.ivars:
            self._add_type(imports, ivar.type_encoding, EncodingStyle.RUNTIME)

        for prop in cls.properties:
            self._add_type(imports, prop.type_name, EncodingStyle.DECLARATION)

        for method in (*cls.instance_methods, *cls.class_methods):
            self._add_method(imports, method)

        return imports.normalize(self.foundation)

    def resolve_protocol(self, proto: ProtocolDescriptor) -> Imports:
        """Walk the protocols a protocol adopts."""
        imports = Imports()
        for protocol_name in proto.protocols:
            self._add_protocol(imports, protocol_name)
        return imports.normalize(self.foundation)

    def resolve_category(self, category: CategoryDescriptor) -> Imports:
        """Reference the extended class only."""
        imports = Imports()
        if category.class_name:
            self._add_class(imports, category.class_name)
        return imports.normalize(self.foundation)

    def _add_method(self, imports: Imports, method: MethodInfo) -> None:
        for index in method_argument_indices(method.number_of_arguments):
            self._add_type(imports, method.argument_type(index), EncodingStyle.DECLARATION)

    def _add_type(self, imports: Imports, type_string: str, style: EncodingStyle) -> None:
        for reference in TypeEncodingClassifier.classify(type_string, style):
            self._add_reference(imports, reference)

    def _add_reference(self, imports: Imports, reference: TypeReference) -> None:
        if reference.kind is ReferenceKind.PROTOCOL:
            self._add_protocol(imports, reference.name)
        else:
            self._add_class(imports, reference.name)

    def _add_protocol(self, imports: Imports, name: str) -> None:
        if name in self.protocol_names:
            imports.add_local(local_protocol_header(name))
        else:
            imports.add_protocol(name)

    def _add_class(self, imports: Imports, name: str) -> None:
        if name in self.class_names:
            imports.add_local(local_class_header(name))
        else:
            imports.add_class(name)
