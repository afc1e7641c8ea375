#!/usr/bin/env python3

"""Binary metadata provider backed by a JSON metadata document.

A metadata document is the already-decoded ObjC metadata of one binary, as
exported by an external Mach-O parser::

    {
      "name": "Widgets",
      "dylib_id": "/System/Library/PrivateFrameworks/Widgets.framework/Widgets",
      "build_versions": ["Platform: iOS, SdkVersion: 17.0, ..."],
      "source_version": "1.2.3.0.0",
      "imported_libraries": ["/System/Library/Frameworks/Foundation.framework/Foundation"],
      "objc": {
        "classes": [{"name": ..., "superclass": ..., "protocols": [...],
                     "ivars": [{"name": ..., "type": ...}],
                     "properties": [{"name": ..., "type": ..., "attributes": [...],
                                     "getter": ..., "setter": ...}],
                     "instance_methods": [{"name": ..., "return_type": ...,
                                           "argument_types": [...]}],
                     "class_methods": [...]}],
        "protocols": [{"name": ..., "identity": "0x1000", ...}],
        "categories": [{"name": ..., "class": ..., ...}]
      }
    }

A missing ``objc`` object means the binary carries no ObjC metadata; a
missing section key inside it raises ``ObjcSectionNotFoundError``.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from ...domain.errors import MetadataParseError, ObjcSectionNotFoundError
from ...domain.models.objc import (
    CategoryDescriptor,
    ClassDescriptor,
    IvarInfo,
    MethodInfo,
    PropertyInfo,
    ProtocolDescriptor,
    ProtocolIdentity,
)
from ..logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def parse_int(value: Any) -> int:
    if isinstance(value, str):
        return int(value, 0)
    return int(value)


def _names(record: dict[str, Any], key: str) -> tuple[str, ...]:
    return tuple(str(name) for name in record.get(key, []))


def decode_ivar(record: dict[str, Any]) -> IvarInfo:
    offset = record.get("offset")
    return IvarInfo(
        name=record["name"],
        type_encoding=record.get("type", ""),
        offset=parse_int(offset) if offset is not None else None,
    )


def decode_property(record: dict[str, Any]) -> PropertyInfo:
    return PropertyInfo(
        name=record["name"],
        type_name=record.get("type", ""),
        attributes=_names(record, "attributes"),
        getter=record.get("getter"),
        setter=record.get("setter"),
    )


def decode_method(record: dict[str, Any]) -> MethodInfo:
    return MethodInfo(
        name=record["name"],
        return_type=record.get("return_type", "void"),
        argument_types=_names(record, "argument_types"),
    )


def _methods(record: dict[str, Any], key: str) -> tuple[MethodInfo, ...]:
    return tuple(decode_method(method) for method in record.get(key, []))


def _properties(record: dict[str, Any]) -> tuple[PropertyInfo, ...]:
    return tuple(decode_property(prop) for prop in record.get("properties", []))


def decode_class(record: dict[str, Any]) -> ClassDescriptor:
    address = record.get("address")
    return ClassDescriptor(
        name=record["name"],
        superclass=record.get("superclass") or "",
        protocols=_names(record, "protocols"),
        ivars=tuple(decode_ivar(ivar) for ivar in record.get("ivars", [])),
        properties=_properties(record),
        instance_methods=_methods(record, "instance_methods"),
        class_methods=_methods(record, "class_methods"),
        address=parse_int(address) if address is not None else None,
    )


def decode_protocol(record: dict[str, Any]) -> ProtocolDescriptor:
    return ProtocolDescriptor(
        name=record["name"],
        identity=ProtocolIdentity(parse_int(record["identity"])),
        protocols=_names(record, "protocols"),
        properties=_properties(record),
        instance_methods=_methods(record, "instance_methods"),
        class_methods=_methods(record, "class_methods"),
        optional_instance_methods=_methods(record, "optional_instance_methods"),
        optional_class_methods=_methods(record, "optional_class_methods"),
    )


def decode_category(record: dict[str, Any]) -> CategoryDescriptor:
    return CategoryDescriptor(
        name=record["name"],
        class_name=record.get("class") or None,
        protocols=_names(record, "protocols"),
        properties=_properties(record),
        instance_methods=_methods(record, "instance_methods"),
        class_methods=_methods(record, "class_methods"),
    )


class JsonBinaryMetadata:
    """MetadataProvider over one decoded metadata document."""

    def __init__(self, document: dict[str, Any], name: str | None = None):
        """Initialize from a parsed document.

        Args:
            document: Parsed metadata document
            name: Display name (defaults to the document's ``name``)
        """
        if not isinstance(document, dict):
            raise MetadataParseError("metadata document must be a JSON object")
        self.document = document
        self.name = name or str(document.get("name", "unknown"))

    @classmethod
    def load(cls, path: Path) -> "JsonBinaryMetadata":
        """Load a metadata document from disk.

        Raises:
            MetadataParseError: If the file is unreadable or not valid JSON
        """
        logger.debug(f"Loading metadata document: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise MetadataParseError(f"failed to load metadata {path}: {e}") from e
        provider = cls(document)
        if not document.get("name"):
            provider.name = path.stem
        return provider

    def has_objc(self) -> bool:
        return isinstance(self.document.get("objc"), dict)

    def dylib_id(self) -> str | None:
        return self.document.get("dylib_id") or None

    def build_versions(self) -> list[str]:
        return [str(version) for version in self.document.get("build_versions", [])]

    def source_version(self) -> str:
        return str(self.document.get("source_version", ""))

    def imported_libraries(self) -> list[str]:
        return [str(lib) for lib in self.document.get("imported_libraries", [])]

    def objc_classes(self) -> list[ClassDescriptor]:
        return self._section("classes", decode_class)

    def objc_protocols(self) -> list[ProtocolDescriptor]:
        return self._section("protocols", decode_protocol)

    def objc_categories(self) -> list[CategoryDescriptor]:
        return self._section("categories", decode_category)

    def _section(self, key: str, decode: Callable[[dict[str, Any]], T]) -> list[T]:
        objc = self.document.get("objc")
        if not isinstance(objc, dict) or key not in objc:
            raise ObjcSectionNotFoundError(f"{self.name}: no ObjC {key} section")
        try:
            return [decode(record) for record in objc[key]]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise MetadataParseError(f"{self.name}: malformed ObjC {key}: {e!r}") from e
