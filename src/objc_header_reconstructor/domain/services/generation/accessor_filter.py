#!/usr/bin/env python3

"""Removal of compiler-synthesized property storage and accessors."""

import dataclasses

from ...models.objc import ClassDescriptor


def transform_setter(selector: str) -> str:
    """Map a setter selector to its property name.

    ``setFoo:`` becomes ``foo``; any other selector is returned unchanged so
    it can be compared against property names as a getter.
    """
    if not (selector.startswith("set") and selector.endswith(":")):
        return selector
    name = selector[len("set") : -1]
    if not name:
        return ""
    return name[:1].lower() + name[1:]


def strip_synthesized_members(cls: ClassDescriptor) -> ClassDescriptor:
    """Return a copy of ``cls`` without property-backing ivars and accessors.

    An ivar is dropped when its name, minus one leading underscore, is a
    property name. An instance method is dropped when it is a property
    getter, or when its setter transform names a property.
    """
    if not cls.properties:
        return cls

    names = {prop.name for prop in cls.properties}
    getters = names | {prop.getter_name for prop in cls.properties}

    ivars = tuple(
        ivar for ivar in cls.ivars if ivar.name.removeprefix("_") not in names
    )
    instance_methods = tuple(
        method
        for method in cls.instance_methods
        if method.name not in getters and transform_setter(method.name) not in names
    )
    return dataclasses.replace(cls, ivars=ivars, instance_methods=instance_methods)
