#!/usr/bin/env python3

"""Construction of the Foundation suppression index from the shared cache."""

from collections.abc import Sequence

from ....infrastructure.config import FOUNDATION_IMAGES
from ....infrastructure.logging import get_logger, log_timing
from ...models.objc import FoundationIndex
from ...repositories import ImageProvider, read_section

logger = get_logger(__name__)


@log_timing
def build_foundation_index(
    image_provider: ImageProvider | None,
    image_names: Sequence[str] = FOUNDATION_IMAGES,
) -> FoundationIndex:
    """Collect class and protocol names of the well-known system images.

    Without a shared cache the index is empty and no suppression happens;
    headers then over-import relative to a run with the cache.

    Args:
        image_provider: Shared-cache image provider, or None
        image_names: Reference images to scan

    Returns:
        Sorted, deduplicated FoundationIndex

    Raises:
        ImageNotFoundError: If a reference image cannot be loaded
        MetadataParseError: If a reference image's metadata is malformed
    """
    if image_provider is None:
        logger.debug("No shared cache configured; Foundation suppression disabled")
        return FoundationIndex.empty()

    classes: list[str] = []
    protocols: list[str] = []
    for image_name in image_names:
        image = image_provider.image(image_name)
        image_classes = read_section(image.objc_classes, f"{image_name} classes")
        image_protocols = read_section(image.objc_protocols, f"{image_name} protocols")
        classes.extend(cls.name for cls in image_classes)
        protocols.extend(proto.name for proto in image_protocols)
        logger.debug(
            f"Scanned {image_name}: {len(image_classes)} classes, "
            f"{len(image_protocols)} protocols"
        )

    index = FoundationIndex.from_names(classes, protocols)
    logger.info(
        f"Foundation index: {len(index.classes)} classes, {len(index.protocols)} protocols"
    )
    return index
