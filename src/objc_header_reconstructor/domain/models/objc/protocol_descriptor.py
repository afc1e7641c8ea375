#!/usr/bin/env python3

"""Protocol descriptor model for ObjC metadata."""

from dataclasses import dataclass, field

from .member_info import PropertyInfo
from .method_info import MethodInfo


@dataclass(frozen=True, order=True)
class ProtocolIdentity:
    """Opaque identity of a protocol definition within one binary.

    The same protocol can be emitted more than once per binary; two
    descriptors describe the same definition only when their identities
    are equal, regardless of name.
    """

    value: int

    def __str__(self) -> str:
        return f"0x{self.value:x}"


@dataclass(frozen=True)
class ProtocolDescriptor:
    """An ObjC protocol as decoded from runtime metadata."""

    name: str
    identity: ProtocolIdentity
    protocols: tuple[str, ...] = field(default_factory=tuple)
    properties: tuple[PropertyInfo, ...] = field(default_factory=tuple)
    instance_methods: tuple[MethodInfo, ...] = field(default_factory=tuple)
    class_methods: tuple[MethodInfo, ...] = field(default_factory=tuple)
    optional_instance_methods: tuple[MethodInfo, ...] = field(default_factory=tuple)
    optional_class_methods: tuple[MethodInfo, ...] = field(default_factory=tuple)
