#!/usr/bin/env python3

"""Sorted name index of well-known system framework classes and protocols."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import dataclass, field


def _sorted_unique(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(set(names)))


def _contains(sorted_names: tuple[str, ...], name: str) -> bool:
    index = bisect_left(sorted_names, name)
    return index < len(sorted_names) and sorted_names[index] == name


@dataclass(frozen=True)
class FoundationIndex:
    """Class and protocol names that are always implicitly available.

    Both sequences are kept sorted and deduplicated so membership is a
    binary search. An empty index performs no suppression.
    """

    classes: tuple[str, ...] = field(default_factory=tuple)
    protocols: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "classes", _sorted_unique(self.classes))
        object.__setattr__(self, "protocols", _sorted_unique(self.protocols))

    @classmethod
    def from_names(cls, classes: Iterable[str], protocols: Iterable[str]) -> FoundationIndex:
        return cls(classes=_sorted_unique(classes), protocols=_sorted_unique(protocols))

    @classmethod
    def empty(cls) -> FoundationIndex:
        return cls()

    def has_class(self, name: str) -> bool:
        return _contains(self.classes, name)

    def has_protocol(self, name: str) -> bool:
        return _contains(self.protocols, name)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.has_class(name) or self.has_protocol(name)

    def __len__(self) -> int:
        return len(self.classes) + len(self.protocols)
