#!/usr/bin/env python3

"""Collaborator interfaces consumed by the domain layer."""

from .metadata_provider import (
    AddressSpace,
    CacheImage,
    FunctionRange,
    ImageProvider,
    MetadataProvider,
    read_section,
)

__all__ = [
    "AddressSpace",
    "CacheImage",
    "FunctionRange",
    "ImageProvider",
    "MetadataProvider",
    "read_section",
]
