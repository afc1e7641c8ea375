#!/usr/bin/env python3

"""Interfaces of the external binary and shared-cache collaborators.

Decoding Mach-O files and dyld shared caches is out of scope; the pipeline
only depends on these structural interfaces.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from ...infrastructure.logging import get_logger
from ..errors import ObjcSectionNotFoundError
from ..models.objc import CategoryDescriptor, ClassDescriptor, ProtocolDescriptor

logger = get_logger(__name__)

T = TypeVar("T")


class MetadataProvider(Protocol):
    """Typed ObjC metadata of one binary.

    The ``objc_*`` methods raise ``ObjcSectionNotFoundError`` when the section
    is absent and ``MetadataParseError`` on any other decoding failure.
    """

    name: str

    def has_objc(self) -> bool: ...

    def dylib_id(self) -> str | None: ...

    def build_versions(self) -> list[str]: ...

    def source_version(self) -> str: ...

    def imported_libraries(self) -> list[str]: ...

    def objc_classes(self) -> list[ClassDescriptor]: ...

    def objc_protocols(self) -> list[ProtocolDescriptor]: ...

    def objc_categories(self) -> list[CategoryDescriptor]: ...


class ImageProvider(Protocol):
    """Resolves image names (full install path or basename) to binaries."""

    def image(self, name: str) -> MetadataProvider:
        """Raises ``ImageNotFoundError`` when no image matches."""
        ...


@dataclass(frozen=True)
class FunctionRange:
    """Bounds of one function inside an image."""

    start: int
    end: int
    name: str = ""

    def contains(self, addr: int) -> bool:
        return self.start <= addr < self.end


@dataclass(frozen=True)
class CacheImage:
    """An image mapped into the shared cache address space."""

    name: str
    start: int
    end: int
    functions: tuple[FunctionRange, ...] = field(default_factory=tuple)

    def contains(self, addr: int) -> bool:
        return self.start <= addr < self.end

    def function_for_addr(self, addr: int) -> FunctionRange | None:
        for function in self.functions:
            if function.contains(addr):
                return function
        return None


class AddressSpace(Protocol):
    """Address-to-image/symbol lookups over a shared cache."""

    def image_containing(self, addr: int) -> CacheImage:
        """Raises ``AddressNotFoundError`` when no image contains ``addr``."""
        ...

    def symbol_at(self, addr: int) -> str | None: ...


def read_section(loader: Callable[[], Sequence[T]], label: str = "") -> list[T]:
    """Call a section loader, treating a missing section as empty.

    Args:
        loader: Bound ``objc_*`` method of a MetadataProvider
        label: Section label for debug logging

    Returns:
        Loaded descriptors, or an empty list when the section is absent
    """
    try:
        return list(loader())
    except ObjcSectionNotFoundError:
        logger.debug(f"ObjC section not present: {label or loader!r}")
        return []
