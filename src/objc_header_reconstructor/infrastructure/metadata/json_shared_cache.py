#!/usr/bin/env python3

"""Shared-cache provider backed by a JSON cache document.

The document lists the images of a shared cache with their address ranges,
function bounds and (optionally) their metadata document, plus a global
address-to-symbol table::

    {
      "images": [
        {"name": "/System/Library/Frameworks/Foundation.framework/Foundation",
         "start": "0x180000000", "end": "0x180400000",
         "metadata": "Foundation.json",
         "functions": [{"start": "0x180001000", "end": "0x180001040", "name": ""}]}
      ],
      "symbols": {"0x180001000": "-[NSString length]"}
    }

``metadata`` is a path relative to the cache document or an inline metadata
document.
"""

import json
from pathlib import Path, PurePosixPath
from typing import Any

from ...domain.errors import AddressNotFoundError, ImageNotFoundError, MetadataParseError
from ...domain.repositories import CacheImage, FunctionRange
from ..logging import get_logger
from .json_metadata_source import JsonBinaryMetadata, parse_int

logger = get_logger(__name__)


class JsonSharedCache:
    """ImageProvider and AddressSpace over a shared cache document."""

    def __init__(self, document: dict[str, Any], base_dir: Path | None = None):
        """Initialize from a parsed cache document.

        Args:
            document: Parsed cache document
            base_dir: Directory relative metadata paths are resolved against
        """
        self.base_dir = base_dir or Path.cwd()
        try:
            self._records: list[dict[str, Any]] = list(document.get("images", []))
            self.images = [self._decode_image(record) for record in self._records]
            self.symbols = {
                parse_int(addr): str(name) for addr, name in document.get("symbols", {}).items()
            }
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise MetadataParseError(f"malformed shared cache document: {e!r}") from e
        self._loaded: dict[str, JsonBinaryMetadata] = {}

    @classmethod
    def open(cls, path: Path) -> "JsonSharedCache":
        """Load a cache document from disk.

        Raises:
            MetadataParseError: If the file is unreadable or not valid JSON
        """
        logger.debug(f"Opening shared cache document: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise MetadataParseError(f"failed to open shared cache {path}: {e}") from e
        if not isinstance(document, dict):
            raise MetadataParseError(f"shared cache {path} must be a JSON object")
        cache = cls(document, base_dir=path.parent)
        logger.info(f"Shared cache loaded from {path} ({len(cache.images)} images)")
        return cache

    @staticmethod
    def _decode_image(record: dict[str, Any]) -> CacheImage:
        functions = tuple(
            FunctionRange(
                start=parse_int(function["start"]),
                end=parse_int(function["end"]),
                name=str(function.get("name", "")),
            )
            for function in record.get("functions", [])
        )
        return CacheImage(
            name=str(record["name"]),
            start=parse_int(record.get("start", 0)),
            end=parse_int(record.get("end", 0)),
            functions=tuple(sorted(functions, key=lambda function: function.start)),
        )

    def _find_record(self, name: str) -> dict[str, Any]:
        for record in self._records:
            if record["name"] == name:
                return record
        for record in self._records:
            if PurePosixPath(record["name"]).name == PurePosixPath(name).name:
                return record
        raise ImageNotFoundError(f"image not in shared cache: {name}")

    def image(self, name: str) -> JsonBinaryMetadata:
        """Return the metadata provider of the image called ``name``."""
        record = self._find_record(name)
        image_name = record["name"]
        if image_name in self._loaded:
            return self._loaded[image_name]

        metadata = record.get("metadata")
        display_name = PurePosixPath(image_name).name
        if metadata is None:
            provider = JsonBinaryMetadata({"name": display_name})
        elif isinstance(metadata, dict):
            provider = JsonBinaryMetadata(metadata, name=display_name)
        else:
            provider = JsonBinaryMetadata.load(self.base_dir / str(metadata))
        self._loaded[image_name] = provider
        return provider

    def image_containing(self, addr: int) -> CacheImage:
        for image in self.images:
            if image.contains(addr):
                return image
        raise AddressNotFoundError(f"address {addr:#x} is not in any image")

    def symbol_at(self, addr: int) -> str | None:
        return self.symbols.get(addr)
