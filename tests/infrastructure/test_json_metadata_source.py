#!/usr/bin/env python3

"""Tests for the JSON metadata document adapter."""

import json

import pytest

from objc_header_reconstructor.domain.errors import (
    MetadataParseError,
    ObjcSectionNotFoundError,
)
from objc_header_reconstructor.domain.models.objc import (
    IvarInfo,
    MethodInfo,
    ProtocolIdentity,
)
from objc_header_reconstructor.domain.repositories import read_section
from objc_header_reconstructor.infrastructure.metadata import JsonBinaryMetadata
from objc_header_reconstructor.infrastructure.metadata.json_metadata_source import parse_int


@pytest.mark.unit
class TestJsonBinaryMetadata:
    """Test suite for JsonBinaryMetadata decoding."""

    def test_binary_fields(self, gears_metadata):
        """Test top-level binary information."""
        assert gears_metadata.name == "Gears"
        assert gears_metadata.has_objc()
        assert gears_metadata.dylib_id().endswith("/Gears")
        assert gears_metadata.build_versions() == ["Platform: iOS, SdkVersion: 17.0"]
        assert gears_metadata.source_version() == "4.5.6.0.0"
        assert gears_metadata.imported_libraries() == []

    def test_classes(self, gears_metadata):
        """Test class records decode into descriptors."""
        (gear,) = gears_metadata.objc_classes()

        assert gear.name == "Gear"
        assert gear.superclass == "NSObject"
        assert gear.protocols == ("Spinning",)
        assert gear.ivars == (IvarInfo(name="_teeth", type_encoding="q", offset=8),)
        assert gear.properties[0].attributes == ("assign",)
        assert gear.instance_methods[1] == MethodInfo(
            name="meshWith:", return_type="BOOL", argument_types=("Gear *", "SEL", "Gear *")
        )
        assert gear.address == 0x4000

    def test_protocols(self, gears_metadata):
        """Test protocol identity is parsed from hex."""
        (spinning,) = gears_metadata.objc_protocols()

        assert spinning.identity == ProtocolIdentity(0x2000)
        assert spinning.instance_methods == (MethodInfo(name="spin"),)

    def test_categories(self, gears_metadata):
        """Test the ``class`` key names the extended class."""
        (oiling,) = gears_metadata.objc_categories()

        assert oiling.class_name == "Gear"
        assert oiling.header_stem == "Gear+Oiling"

    def test_without_objc(self):
        """Test a document without ``objc`` has no metadata."""
        binary = JsonBinaryMetadata({"name": "Plain"})

        assert not binary.has_objc()
        assert binary.dylib_id() is None
        assert binary.build_versions() == []

    def test_missing_section(self):
        """Test an absent section raises the not-present signal."""
        binary = JsonBinaryMetadata({"name": "Partial", "objc": {"classes": []}})

        with pytest.raises(ObjcSectionNotFoundError):
            binary.objc_protocols()
        assert read_section(binary.objc_protocols) == []

    def test_malformed_section(self):
        """Test a record missing required keys raises MetadataParseError."""
        binary = JsonBinaryMetadata({"name": "Broken", "objc": {"classes": [{"superclass": "X"}]}})

        with pytest.raises(MetadataParseError):
            binary.objc_classes()
        with pytest.raises(MetadataParseError):
            read_section(binary.objc_classes)

    def test_non_object_document(self):
        """Test documents must be JSON objects."""
        with pytest.raises(MetadataParseError):
            JsonBinaryMetadata(["not", "an", "object"])


@pytest.mark.unit
class TestJsonBinaryMetadataLoad:
    """Test suite for loading metadata documents from disk."""

    def test_load(self, tmp_path, metadata_document):
        """Test loading a document file."""
        path = tmp_path / "gears.json"
        path.write_text(json.dumps(metadata_document), encoding="utf-8")

        binary = JsonBinaryMetadata.load(path)

        assert binary.name == "Gears"
        assert len(binary.objc_classes()) == 1

    def test_load_name_falls_back_to_stem(self, tmp_path):
        """Test unnamed documents take the file stem."""
        path = tmp_path / "Anonymous.json"
        path.write_text('{"objc": {}}', encoding="utf-8")

        assert JsonBinaryMetadata.load(path).name == "Anonymous"

    def test_load_invalid_json(self, tmp_path):
        """Test malformed JSON raises MetadataParseError."""
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(MetadataParseError):
            JsonBinaryMetadata.load(path)

    def test_load_missing_file(self, tmp_path):
        """Test unreadable files raise MetadataParseError."""
        with pytest.raises(MetadataParseError):
            JsonBinaryMetadata.load(tmp_path / "missing.json")


@pytest.mark.unit
@pytest.mark.parametrize(("value", "expected"), [("0x10", 16), ("42", 42), (7, 7)])
def test_parse_int(value, expected):
    """Test hex strings, decimal strings and integers."""
    assert parse_int(value) == expected
