#!/usr/bin/env python3

"""Per-entity import sets and their normalization.

An ``Imports`` value collects four kinds of references for one header:

- ``imports``: framework-level hints (``Foundation``)
- ``locals``: same-module header file names to ``#include``
- ``classes``: names needing an ``@class`` forward declaration
- ``protos``: names needing an ``@protocol`` forward declaration

``normalize`` sorts and deduplicates all four and drops every reference the
Foundation index says is always available.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .foundation_index import FoundationIndex

PROTOCOL_HEADER_SUFFIX = "-Protocol.h"
HEADER_SUFFIX = ".h"


def local_class_header(name: str) -> str:
    return f"{name}{HEADER_SUFFIX}"


def local_protocol_header(name: str) -> str:
    return f"{name}{PROTOCOL_HEADER_SUFFIX}"


def strip_header_suffix(local: str) -> str:
    """Recover the entity name from a local include file name."""
    if local.endswith(PROTOCOL_HEADER_SUFFIX):
        return local[: -len(PROTOCOL_HEADER_SUFFIX)]
    if local.endswith(HEADER_SUFFIX):
        return local[: -len(HEADER_SUFFIX)]
    return local


@dataclass
class Imports:
    """Raw or normalized import references for one header."""

    imports: list[str] = field(default_factory=list)
    locals: list[str] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)
    protos: list[str] = field(default_factory=list)

    def add_framework(self, name: str) -> None:
        self.imports.append(name)

    def add_local(self, header: str) -> None:
        self.locals.append(header)

    def add_class(self, name: str) -> None:
        self.classes.append(name)

    def add_protocol(self, name: str) -> None:
        self.protos.append(name)

    def is_empty(self) -> bool:
        return not (self.imports or self.locals or self.classes or self.protos)

    def normalize(self, foundation: FoundationIndex) -> Imports:
        """Return a sorted, deduplicated copy with Foundation names removed.

        Framework hints are deduplicated but never filtered. A name resolved
        to a local include is not also forward declared. Applying this to an
        already normalized value returns an equal value.

        Args:
            foundation: Index of always-available class and protocol names

        Returns:
            New normalized Imports
        """
        locals_ = [
            local
            for local in sorted(set(self.locals))
            if strip_header_suffix(local) not in foundation
        ]
        local_set = set(locals_)
        classes = [
            name
            for name in sorted(set(self.classes))
            if not foundation.has_class(name) and local_class_header(name) not in local_set
        ]
        protos = [
            name
            for name in sorted(set(self.protos))
            if not foundation.has_protocol(name)
            and local_protocol_header(name) not in local_set
        ]
        return Imports(
            imports=sorted(set(self.imports)),
            locals=locals_,
            classes=classes,
            protos=protos,
        )
