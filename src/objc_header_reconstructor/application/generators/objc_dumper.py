#!/usr/bin/env python3

"""Textual listing of ObjC metadata, optionally filtered by name pattern."""

import re
from enum import Enum
from typing import Any

from ...domain.errors import ConfigurationError
from ...domain.models.objc import (
    CategoryDescriptor,
    ClassDescriptor,
    FoundationIndex,
    ProtocolDescriptor,
)
from ...domain.repositories import read_section
from ...domain.services.generation import DeclarationRenderer
from ...infrastructure.logging import get_logger
from .base_generator import BaseGenerator
from .objc_generator import category_sort_key, protocol_sort_key, unique_protocols

logger = get_logger(__name__)


class EntityKind(Enum):
    """Which kind of entity a dump covers."""

    CLASS = "class"
    PROTOCOL = "protocol"
    CATEGORY = "category"


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a name filter.

    Raises:
        ConfigurationError: If ``pattern`` is not a valid regular expression
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(f"failed to compile regex {pattern!r}: {e}") from e


def summary_line(entity: ClassDescriptor | ProtocolDescriptor | CategoryDescriptor) -> str:
    """One-line description of an entity."""
    if isinstance(entity, ClassDescriptor):
        superclass = f" : {entity.superclass}" if entity.superclass else ""
        return f"@interface {entity.name}{superclass}"
    if isinstance(entity, ProtocolDescriptor):
        return f"@protocol {entity.name}"
    return f"@interface {entity.class_name or '?'} ({entity.name})"


class ObjcDumper(BaseGenerator):
    """Lists classes, protocols and categories of a binary and its dependencies."""

    def generate(self, **options: Any) -> list[str]:
        """Dispatch to ``dump`` or ``dump_kind``.

        Args:
            **options: ``kind`` (EntityKind), ``pattern`` (str), ``verbose`` (bool)
        """
        kind: EntityKind | None = options.get("kind")
        verbose = bool(options.get("verbose", False))
        if kind is None:
            return self.dump(verbose=verbose)
        return self.dump_kind(kind, options.get("pattern", ""), verbose=verbose)

    def dump(self, verbose: bool = False) -> list[str]:
        """Protocols, classes then categories of every binary, in name order."""
        render = self._renderer(verbose)
        entries: list[str] = []
        for binary in self.binaries():
            protocols = sorted(read_section(binary.objc_protocols), key=protocol_sort_key)
            classes = sorted(read_section(binary.objc_classes), key=lambda c: c.name)
            categories = sorted(read_section(binary.objc_categories), key=category_sort_key)
            entries.extend(
                render(proto) for proto in unique_protocols(protocols, FoundationIndex.empty())
            )
            entries.extend(render(cls) for cls in classes)
            entries.extend(render(category) for category in categories)
        return entries

    def dump_kind(self, kind: EntityKind, pattern: str, verbose: bool = True) -> list[str]:
        """Entities of one kind whose name matches ``pattern``.

        Raises:
            ConfigurationError: If ``pattern`` is malformed
        """
        regex = compile_pattern(pattern)
        render = self._renderer(verbose)
        entries: list[str] = []
        for binary in self.binaries():
            entities: list[Any]
            if kind is EntityKind.CLASS:
                entities = read_section(binary.objc_classes)
            elif kind is EntityKind.PROTOCOL:
                entities = unique_protocols(
                    sorted(read_section(binary.objc_protocols), key=protocol_sort_key),
                    FoundationIndex.empty(),
                )
            else:
                entities = sorted(read_section(binary.objc_categories), key=category_sort_key)

            matched = [
                entity
                for entity in sorted(entities, key=lambda e: e.name)
                if regex.search(entity.name)
            ]
            logger.debug(f"{binary.name}: {len(matched)} {kind.value} entries match {pattern!r}")
            entries.extend(render(entity) for entity in matched)
        return entries

    @staticmethod
    def _renderer(verbose: bool) -> Any:
        if not verbose:
            return summary_line

        def render(entity: Any) -> str:
            if isinstance(entity, ClassDescriptor):
                return DeclarationRenderer.render_class(entity)
            if isinstance(entity, ProtocolDescriptor):
                return DeclarationRenderer.render_protocol(entity)
            return DeclarationRenderer.render_category(entity)

        return render
