#!/usr/bin/env python3

"""Base generator for ObjC metadata processing.

This module provides the foundational abstract class for all generators:
validation of the primary binary and expansion to its imported libraries.
"""

from abc import ABC, abstractmethod
from typing import Any

from ...domain.errors import ConfigurationError, NoObjcMetadataError
from ...domain.repositories import ImageProvider, MetadataProvider
from ...infrastructure.config import get_config
from ...infrastructure.logging import get_logger

logger = get_logger(__name__)


class BaseGenerator(ABC):
    """Abstract base class for generators over one binary and its dependencies.

    Subclasses must implement the generate() method for their specific output.
    """

    def __init__(
        self,
        binary: MetadataProvider,
        image_provider: ImageProvider | None = None,
        include_dependencies: bool = False,
        private_dependencies_only: bool = False,
    ):
        """Initialize generator with the primary binary.

        Args:
            binary: Primary binary metadata
            image_provider: Shared cache used to resolve imported libraries
            include_dependencies: Also process imported libraries
            private_dependencies_only: Restrict dependencies to private frameworks

        Raises:
            NoObjcMetadataError: If the primary binary has no ObjC metadata
            ConfigurationError: If dependencies are requested without a shared cache
            ImageNotFoundError: If an imported library cannot be loaded
        """
        if not binary.has_objc():
            raise NoObjcMetadataError(f"{binary.name} does not contain objc info")

        if include_dependencies and image_provider is None:
            raise ConfigurationError(
                "a shared cache is required to process imported frameworks"
            )

        self.binary = binary
        self.image_provider = image_provider
        self.include_dependencies = include_dependencies
        self.dependencies: list[MetadataProvider] = []

        if include_dependencies:
            assert image_provider is not None
            self.dependencies = self._load_dependencies(
                image_provider, private_dependencies_only
            )

    def _load_dependencies(
        self, image_provider: ImageProvider, private_only: bool
    ) -> list[MetadataProvider]:
        marker = get_config()["PRIVATE_FRAMEWORK_MARKER"]
        names = [
            name
            for name in self.binary.imported_libraries()
            if not private_only or marker in name
        ]
        dependencies = [image_provider.image(name) for name in names]
        logger.info(f"Loaded {len(dependencies)} imported libraries of {self.binary.name}")
        return dependencies

    def binaries(self) -> list[MetadataProvider]:
        """The primary binary followed by any loaded dependencies."""
        return [self.binary, *self.dependencies]

    @abstractmethod
    def generate(self, **options: Any) -> Any:
        """Generate output for the configured binaries."""
