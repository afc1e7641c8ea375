"""Path utilities for generated header files."""

from pathlib import Path, PurePosixPath

from ..domain.models.objc import (
    CategoryDescriptor,
    local_class_header,
    local_protocol_header,
)


def module_name_from_dylib_id(dylib_id: str) -> str:
    """Module name of a dylib install name (its last path component)."""
    return PurePosixPath(dylib_id).name


def class_header_filename(class_name: str) -> str:
    return local_class_header(class_name)


def protocol_header_filename(protocol_name: str) -> str:
    return local_protocol_header(protocol_name)


def category_header_filename(category: CategoryDescriptor) -> str:
    """``Class+Category.h`` when the extended class is known, else ``Category.h``."""
    return f"{category.header_stem}.h"


def umbrella_header_name(module: str, emitted: list[str], suffix: str = "-Umbrella") -> str:
    """Umbrella header stem, avoiding collision with a ``<Module>.h`` class header."""
    if f"{module}.h" in emitted:
        return f"{module}{suffix}"
    return module


def module_output_dir(output_root: Path, module: str) -> Path:
    return output_root / module
