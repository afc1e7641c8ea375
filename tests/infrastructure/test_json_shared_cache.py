#!/usr/bin/env python3

"""Tests for the JSON shared-cache adapter."""

import json

import pytest

from objc_header_reconstructor.domain.errors import (
    AddressNotFoundError,
    ImageNotFoundError,
    MetadataParseError,
)
from objc_header_reconstructor.infrastructure.metadata import JsonSharedCache

FOUNDATION = "/System/Library/Frameworks/Foundation.framework/Foundation"
GEARS = "/System/Library/PrivateFrameworks/Gears.framework/Gears"


@pytest.fixture
def cache_path(tmp_path, metadata_document):
    """Cache document on disk with file, inline and missing metadata."""
    (tmp_path / "Foundation.json").write_text(
        json.dumps(
            {
                "name": "Foundation",
                "objc": {"classes": [{"name": "NSString"}], "protocols": []},
            }
        ),
        encoding="utf-8",
    )
    document = {
        "images": [
            {
                "name": FOUNDATION,
                "start": "0x1000",
                "end": "0x2000",
                "metadata": "Foundation.json",
                "functions": [
                    {"start": "0x1010", "end": "0x1020", "name": ""},
                    {"start": "0x1000", "end": "0x1010", "name": "first"},
                ],
            },
            {"name": GEARS, "start": "0x2000", "end": "0x3000", "metadata": metadata_document},
            {"name": "/usr/lib/libplain.dylib", "start": 12288, "end": 16384},
        ],
        "symbols": {"0x1010": "-[NSString length]"},
    }
    path = tmp_path / "cache.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.mark.unit
class TestJsonSharedCache:
    """Test suite for JsonSharedCache."""

    def test_image_by_basename(self, cache_path):
        """Test images resolve by basename and load file metadata."""
        cache = JsonSharedCache.open(cache_path)

        foundation = cache.image("Foundation")

        assert [cls.name for cls in foundation.objc_classes()] == ["NSString"]

    def test_image_by_full_path_is_cached(self, cache_path):
        """Test the same provider is returned for repeated lookups."""
        cache = JsonSharedCache.open(cache_path)

        assert cache.image(FOUNDATION) is cache.image("Foundation")

    def test_inline_metadata(self, cache_path):
        """Test inline documents are named after the image."""
        gears = JsonSharedCache.open(cache_path).image(GEARS)

        assert gears.name == "Gears"
        assert gears.has_objc()

    def test_image_without_metadata(self, cache_path):
        """Test images without metadata have no ObjC info."""
        plain = JsonSharedCache.open(cache_path).image("libplain.dylib")

        assert not plain.has_objc()

    def test_missing_image(self, cache_path):
        """Test unknown images raise ImageNotFoundError."""
        with pytest.raises(ImageNotFoundError):
            JsonSharedCache.open(cache_path).image("UIKit")

    def test_image_containing(self, cache_path):
        """Test address ranges and sorted functions."""
        cache = JsonSharedCache.open(cache_path)

        image = cache.image_containing(0x1018)

        assert image.name == FOUNDATION
        assert [function.start for function in image.functions] == [0x1000, 0x1010]
        assert image.function_for_addr(0x1018).start == 0x1010
        assert cache.image_containing(0x3000).name == "/usr/lib/libplain.dylib"

    def test_image_containing_miss(self, cache_path):
        """Test addresses outside every image raise."""
        with pytest.raises(AddressNotFoundError):
            JsonSharedCache.open(cache_path).image_containing(0x9000)

    def test_symbol_at(self, cache_path):
        """Test the symbol table is keyed by parsed address."""
        cache = JsonSharedCache.open(cache_path)

        assert cache.symbol_at(0x1010) == "-[NSString length]"
        assert cache.symbol_at(0x1000) is None


@pytest.mark.unit
class TestJsonSharedCacheErrors:
    """Test suite for malformed cache documents."""

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises MetadataParseError."""
        path = tmp_path / "cache.json"
        path.write_text("[", encoding="utf-8")

        with pytest.raises(MetadataParseError):
            JsonSharedCache.open(path)

    def test_non_object(self, tmp_path):
        """Test cache documents must be JSON objects."""
        path = tmp_path / "cache.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(MetadataParseError):
            JsonSharedCache.open(path)

    def test_malformed_image(self):
        """Test image records need a name."""
        with pytest.raises(MetadataParseError):
            JsonSharedCache({"images": [{"start": 0, "end": 1}]})
