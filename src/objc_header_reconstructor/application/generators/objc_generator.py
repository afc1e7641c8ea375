#!/usr/bin/env python3

"""ObjC header generator orchestrator (Application Layer).

Drives the modular components for every processed binary:
- build_foundation_index: system-framework suppression set
- DependencyResolver: per-entity import sets
- DeclarationRenderer: @interface/@protocol bodies
- HeaderAssembler: header text and file output
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...domain.models.objc import (
    CategoryDescriptor,
    FoundationIndex,
    HeaderInfo,
    Imports,
    ModuleImports,
    ProtocolDescriptor,
    ProtocolIdentity,
)
from ...domain.repositories import ImageProvider, MetadataProvider, read_section
from ...domain.services.generation import (
    DeclarationRenderer,
    DependencyResolver,
    HeaderAssembler,
    build_foundation_index,
    strip_synthesized_members,
)
from ...infrastructure.config import get_config
from ...infrastructure.logging import ProgressTracker, get_logger, log_timing
from ...utils.path_utils import (
    category_header_filename,
    class_header_filename,
    module_name_from_dylib_id,
    module_output_dir,
    protocol_header_filename,
    umbrella_header_name,
)
from .base_generator import BaseGenerator

logger = get_logger(__name__)


@dataclass
class ModuleResult:
    """Headers written for one module."""

    module: str
    headers: list[Path] = field(default_factory=list)
    umbrella: Path | None = None


def protocol_sort_key(proto: ProtocolDescriptor) -> tuple[str, ProtocolIdentity]:
    return (proto.name, proto.identity)


def category_sort_key(category: CategoryDescriptor) -> tuple[str, str]:
    return (category.name, category.class_name or "")


def unique_protocols(
    protocols: list[ProtocolDescriptor], foundation: FoundationIndex
) -> list[ProtocolDescriptor]:
    """Drop Foundation protocols and repeated definitions of the same identity.

    Order is preserved; the first descriptor of each identity wins.
    """
    seen: set[ProtocolIdentity] = set()
    result = []
    for proto in protocols:
        if foundation.has_protocol(proto.name):
            continue
        if proto.identity in seen:
            continue
        seen.add(proto.identity)
        result.append(proto)
    return result


class ObjcHeaderGenerator(BaseGenerator):
    """Writes one header per class, protocol and category, plus an umbrella.

    Binaries are processed one after another; entities within a binary in
    name order, since the umbrella lists headers in emission order.
    """

    def __init__(
        self,
        binary: MetadataProvider,
        output_dir: Path,
        tool_version: str,
        image_provider: ImageProvider | None = None,
        include_dependencies: bool = False,
    ):
        """Initialize header generator.

        Args:
            binary: Primary binary metadata
            output_dir: Root directory; one subdirectory per module
            tool_version: Version shown in the generated-by banner
            image_provider: Shared cache for Foundation scanning and dependencies
            include_dependencies: Also write headers for private frameworks it imports
        """
        super().__init__(
            binary,
            image_provider=image_provider,
            include_dependencies=include_dependencies,
            private_dependencies_only=True,
        )
        self.output_dir = output_dir
        self.tool_version = tool_version
        self.assembler = HeaderAssembler()
        self.umbrella_suffix = get_config()["UMBRELLA_SUFFIX"]
        self.foundation: FoundationIndex = FoundationIndex.empty()
        self.tracker = ProgressTracker(logger)

    @log_timing
    def generate(self, **options: Any) -> list[ModuleResult]:
        """Write headers for every dependency, then for the primary binary.

        Returns:
            One result per module that carried ObjC metadata

        Raises:
            ImageNotFoundError: If a Foundation reference image is missing
            MetadataParseError: If any binary's metadata is malformed
            HeaderWriteError: If any header cannot be written
        """
        with self.tracker.track_operation("foundation index"):
            self.foundation = build_foundation_index(self.image_provider)

        results = []
        for binary in [*self.dependencies, self.binary]:
            result = self.write_module(binary)
            if result is not None:
                results.append(result)

        self.tracker.report_summary()
        return results

    def write_module(self, binary: MetadataProvider) -> ModuleResult | None:
        """Write all headers of one binary; None if it has no ObjC metadata."""
        if not binary.has_objc():
            logger.info(f"Skipping {binary.name}: no ObjC metadata")
            return None

        dylib_id = binary.dylib_id()
        module = module_name_from_dylib_id(dylib_id) if dylib_id else binary.name
        build_versions = binary.build_versions()
        source_version = binary.source_version()

        classes = sorted(read_section(binary.objc_classes, "classes"), key=lambda c: c.name)
        protocols = sorted(
            read_section(binary.objc_protocols, "protocols"), key=protocol_sort_key
        )
        categories = sorted(
            read_section(binary.objc_categories, "categories"), key=category_sort_key
        )

        resolver = DependencyResolver(
            self.foundation,
            class_names=[cls.name for cls in classes],
            protocol_names=[proto.name for proto in protocols],
        )
        imports: ModuleImports = resolver.resolve_module(classes, protocols, categories)

        out_dir = module_output_dir(self.output_dir, module)
        result = ModuleResult(module=module)

        def emit(filename: str, name: str, imports_: Imports, body: str) -> None:
            path = self.assembler.write(
                HeaderInfo(
                    path=out_dir / filename,
                    tool_version=self.tool_version,
                    build_versions=build_versions,
                    source_version=source_version,
                    name=name,
                    imports=imports_,
                    body=body,
                )
            )
            result.headers.append(path)
            self.tracker.count_header()

        with self.tracker.track_module(module):
            for cls in classes:
                emit(
                    class_header_filename(cls.name),
                    cls.name,
                    imports.for_class(cls.name),
                    DeclarationRenderer.render_class(strip_synthesized_members(cls)),
                )

            for proto in unique_protocols(protocols, self.foundation):
                emit(
                    protocol_header_filename(proto.name),
                    proto.name,
                    imports.for_protocol(proto.identity),
                    DeclarationRenderer.render_protocol(proto),
                )

            for category in categories:
                emit(
                    category_header_filename(category),
                    category.name,
                    imports.for_category(category.header_stem),
                    DeclarationRenderer.render_category(category),
                )

            if result.headers:
                result.umbrella = self._write_umbrella(
                    out_dir, module, result.headers, build_versions, source_version
                )

        return result

    def _write_umbrella(
        self,
        out_dir: Path,
        module: str,
        headers: list[Path],
        build_versions: list[str],
        source_version: str,
    ) -> Path:
        emitted = [path.name for path in headers]
        umbrella = umbrella_header_name(module, emitted, self.umbrella_suffix)
        body = "\n".join(f'#import "{name}"' for name in emitted) + "\n"
        return self.assembler.write(
            HeaderInfo(
                path=out_dir / f"{umbrella}.h",
                tool_version=self.tool_version,
                build_versions=build_versions,
                source_version=source_version,
                name=umbrella,
                body=body,
                is_umbrella=True,
            )
        )
