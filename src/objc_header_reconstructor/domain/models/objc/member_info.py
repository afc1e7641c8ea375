#!/usr/bin/env python3

"""Ivar and property models for ObjC metadata."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IvarInfo:
    """An instance variable with its raw runtime type encoding."""

    name: str
    type_encoding: str  # e.g. '@"NSString"', '@"<NSCopying>"', 'q'
    offset: int | None = None


@dataclass(frozen=True)
class PropertyInfo:
    """A declared property.

    ``type_name`` is written in declaration style (``NSString *``,
    ``id<Foo>``, ``long long``), unlike ivar encodings.
    """

    name: str
    type_name: str
    attributes: tuple[str, ...] = field(default_factory=tuple)
    getter: str | None = None
    setter: str | None = None

    @property
    def getter_name(self) -> str:
        """Selector of the getter, custom or derived from the name."""
        return self.getter or self.name

    @property
    def setter_name(self) -> str:
        """Selector of the setter, custom or derived from the name."""
        if self.setter:
            return self.setter
        if not self.name:
            return ""
        return f"set{self.name[:1].upper()}{self.name[1:]}:"
