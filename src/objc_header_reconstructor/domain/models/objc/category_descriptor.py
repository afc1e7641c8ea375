#!/usr/bin/env python3

"""Category descriptor model for ObjC metadata."""

from dataclasses import dataclass, field

from .member_info import PropertyInfo
from .method_info import MethodInfo


@dataclass(frozen=True)
class CategoryDescriptor:
    """An ObjC category; ``class_name`` is None when the base is unresolved."""

    name: str
    class_name: str | None = None
    protocols: tuple[str, ...] = field(default_factory=tuple)
    properties: tuple[PropertyInfo, ...] = field(default_factory=tuple)
    instance_methods: tuple[MethodInfo, ...] = field(default_factory=tuple)
    class_methods: tuple[MethodInfo, ...] = field(default_factory=tuple)

    @property
    def header_stem(self) -> str:
        """File stem of this category's header (``Class+Category`` or ``Category``)."""
        if self.class_name:
            return f"{self.class_name}+{self.name}"
        return self.name
