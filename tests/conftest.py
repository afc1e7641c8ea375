"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any, Optional

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from objc_header_reconstructor.domain.errors import ImageNotFoundError, ObjcSectionNotFoundError
from objc_header_reconstructor.domain.models.objc import (
    CategoryDescriptor,
    ClassDescriptor,
    FoundationIndex,
    IvarInfo,
    MethodInfo,
    PropertyInfo,
    ProtocolDescriptor,
    ProtocolIdentity,
)
from objc_header_reconstructor.infrastructure.logging import LoggerSetup
from objc_header_reconstructor.infrastructure.metadata import JsonBinaryMetadata


class InMemoryBinary:
    """MetadataProvider over descriptor lists; ``None`` means section missing."""

    def __init__(
        self,
        name: str,
        classes: Optional[list[ClassDescriptor]] = None,
        protocols: Optional[list[ProtocolDescriptor]] = None,
        categories: Optional[list[CategoryDescriptor]] = None,
        dylib_id: Optional[str] = None,
        imported_libraries: Optional[list[str]] = None,
        has_objc: bool = True,
        build_versions: Optional[list[str]] = None,
        source_version: str = "1.0.0.0.0",
    ):
        self.name = name
        self._classes = classes
        self._protocols = protocols
        self._categories = categories
        self._dylib_id = dylib_id
        self._imported = imported_libraries or []
        self._has_objc = has_objc
        self._build_versions = build_versions if build_versions is not None else []
        self._source_version = source_version

    def has_objc(self) -> bool:
        return self._has_objc

    def dylib_id(self) -> Optional[str]:
        return self._dylib_id

    def build_versions(self) -> list[str]:
        return list(self._build_versions)

    def source_version(self) -> str:
        return self._source_version

    def imported_libraries(self) -> list[str]:
        return list(self._imported)

    def objc_classes(self) -> list[ClassDescriptor]:
        return self._section(self._classes, "classes")

    def objc_protocols(self) -> list[ProtocolDescriptor]:
        return self._section(self._protocols, "protocols")

    def objc_categories(self) -> list[CategoryDescriptor]:
        return self._section(self._categories, "categories")

    def _section(self, items: Optional[list[Any]], key: str) -> list[Any]:
        if items is None:
            raise ObjcSectionNotFoundError(f"{self.name}: no {key}")
        return list(items)


class InMemoryImages:
    """ImageProvider over a name -> binary mapping, matched by basename."""

    def __init__(self, images: dict[str, Any]):
        self.images = images
        self.requested: list[str] = []

    def image(self, name: str) -> Any:
        self.requested.append(name)
        basename = name.rsplit("/", 1)[-1]
        if basename not in self.images:
            raise ImageNotFoundError(f"image not in shared cache: {name}")
        return self.images[basename]


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Let every test initialize logging from scratch."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()


@pytest.fixture
def make_binary() -> Callable[..., InMemoryBinary]:
    """Factory for in-memory binaries."""
    return InMemoryBinary


@pytest.fixture
def make_images() -> Callable[..., InMemoryImages]:
    """Factory for in-memory shared caches."""
    return InMemoryImages


@pytest.fixture
def foundation_images(make_binary: Callable[..., InMemoryBinary]) -> InMemoryImages:
    """Shared cache holding Foundation and CoreFoundation only."""
    foundation = make_binary(
        "Foundation",
        classes=[ClassDescriptor(name="NSObject"), ClassDescriptor(name="NSString")],
        protocols=[
            ProtocolDescriptor(name="NSCopying", identity=ProtocolIdentity(0x9000)),
            ProtocolDescriptor(name="NSObject", identity=ProtocolIdentity(0x9010)),
        ],
    )
    core_foundation = make_binary(
        "CoreFoundation",
        classes=[ClassDescriptor(name="NSArray")],
        protocols=None,
    )
    return InMemoryImages({"Foundation": foundation, "CoreFoundation": core_foundation})


@pytest.fixture
def foundation_index() -> FoundationIndex:
    """Suppression index matching ``foundation_images``."""
    return FoundationIndex.from_names(
        ["NSArray", "NSObject", "NSString"], ["NSCopying", "NSObject"]
    )


@pytest.fixture
def widget_classes() -> list[ClassDescriptor]:
    """Classes of the sample Widgets module."""
    widget = ClassDescriptor(
        name="Widget",
        superclass="NSObject",
        protocols=("WidgetDelegate",),
        ivars=(
            IvarInfo(name="_title", type_encoding='@"NSString"'),
            IvarInfo(name="_gadget", type_encoding='@"Gadget"'),
            IvarInfo(name="_count", type_encoding="q"),
        ),
        properties=(
            PropertyInfo(name="title", type_name="NSString *", attributes=("copy",)),
        ),
        instance_methods=(
            MethodInfo(name="title", return_type="NSString *"),
            MethodInfo(
                name="setTitle:",
                argument_types=("Widget *", "SEL", "NSString *"),
            ),
            MethodInfo(
                name="attachGadget:",
                argument_types=("Widget *", "SEL", "Gadget *"),
            ),
        ),
    )
    gadget = ClassDescriptor(name="Gadget", superclass="NSObject")
    return [widget, gadget]


@pytest.fixture
def widget_protocols() -> list[ProtocolDescriptor]:
    """Protocols of the sample Widgets module, one emitted twice."""
    delegate = ProtocolDescriptor(
        name="WidgetDelegate",
        identity=ProtocolIdentity(0x1000),
        protocols=("NSObject",),
        instance_methods=(
            MethodInfo(
                name="widgetDidChange:",
                argument_types=("id", "SEL", "Widget *"),
            ),
        ),
    )
    return [delegate, delegate]


@pytest.fixture
def widget_categories() -> list[CategoryDescriptor]:
    """Categories of the sample Widgets module."""
    return [
        CategoryDescriptor(
            name="Layout",
            class_name="Widget",
            instance_methods=(MethodInfo(name="layout"),),
        )
    ]


@pytest.fixture
def widget_binary(
    make_binary: Callable[..., InMemoryBinary],
    widget_classes: list[ClassDescriptor],
    widget_protocols: list[ProtocolDescriptor],
    widget_categories: list[CategoryDescriptor],
) -> InMemoryBinary:
    """The sample Widgets private framework."""
    return make_binary(
        "Widgets",
        classes=widget_classes,
        protocols=widget_protocols,
        categories=widget_categories,
        dylib_id="/System/Library/PrivateFrameworks/Widgets.framework/Widgets",
        build_versions=["Platform: iOS, SdkVersion: 17.0"],
        source_version="1.2.3.0.0",
        imported_libraries=[
            "/System/Library/Frameworks/Foundation.framework/Foundation",
            "/System/Library/PrivateFrameworks/Gears.framework/Gears",
        ],
    )


@pytest.fixture
def metadata_document() -> dict[str, Any]:
    """JSON metadata document of a tiny module."""
    return {
        "name": "Gears",
        "dylib_id": "/System/Library/PrivateFrameworks/Gears.framework/Gears",
        "build_versions": ["Platform: iOS, SdkVersion: 17.0"],
        "source_version": "4.5.6.0.0",
        "imported_libraries": [],
        "objc": {
            "classes": [
                {
                    "name": "Gear",
                    "superclass": "NSObject",
                    "protocols": ["Spinning"],
                    "ivars": [{"name": "_teeth", "type": "q", "offset": "0x8"}],
                    "properties": [
                        {"name": "teeth", "type": "long long", "attributes": ["assign"]}
                    ],
                    "instance_methods": [
                        {"name": "teeth", "return_type": "long long",
                         "argument_types": ["Gear *", "SEL"]},
                        {"name": "meshWith:", "return_type": "BOOL",
                         "argument_types": ["Gear *", "SEL", "Gear *"]},
                    ],
                    "class_methods": [],
                    "address": "0x4000",
                }
            ],
            "protocols": [
                {"name": "Spinning", "identity": "0x2000",
                 "instance_methods": [{"name": "spin"}]}
            ],
            "categories": [
                {"name": "Oiling", "class": "Gear",
                 "instance_methods": [{"name": "oil"}]}
            ],
        },
    }


@pytest.fixture
def gears_metadata(metadata_document: dict[str, Any]) -> JsonBinaryMetadata:
    """Metadata provider over ``metadata_document``."""
    return JsonBinaryMetadata(metadata_document)
