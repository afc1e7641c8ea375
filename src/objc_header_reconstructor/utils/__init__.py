"""Utility helpers."""

from .path_utils import (
    category_header_filename,
    class_header_filename,
    module_name_from_dylib_id,
    module_output_dir,
    protocol_header_filename,
    umbrella_header_name,
)

__all__ = [
    "category_header_filename",
    "class_header_filename",
    "module_name_from_dylib_id",
    "module_output_dir",
    "protocol_header_filename",
    "umbrella_header_name",
]
