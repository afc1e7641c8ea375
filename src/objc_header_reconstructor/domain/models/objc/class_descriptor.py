#!/usr/bin/env python3

"""Class descriptor model for ObjC metadata."""

from dataclasses import dataclass, field

from .member_info import IvarInfo, PropertyInfo
from .method_info import MethodInfo


@dataclass(frozen=True)
class ClassDescriptor:
    """An ObjC class as decoded from runtime metadata.

    Owned by the binary that produced it; the pipeline never mutates it and
    derives stripped copies with ``dataclasses.replace`` instead.
    """

    name: str
    superclass: str = ""
    protocols: tuple[str, ...] = field(default_factory=tuple)
    ivars: tuple[IvarInfo, ...] = field(default_factory=tuple)
    properties: tuple[PropertyInfo, ...] = field(default_factory=tuple)
    instance_methods: tuple[MethodInfo, ...] = field(default_factory=tuple)
    class_methods: tuple[MethodInfo, ...] = field(default_factory=tuple)
    address: int | None = None
