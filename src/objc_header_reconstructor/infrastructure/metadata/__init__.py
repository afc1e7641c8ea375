#!/usr/bin/env python3

"""JSON document adapters for the binary and shared-cache collaborators."""

from .json_metadata_source import JsonBinaryMetadata
from .json_shared_cache import JsonSharedCache

__all__ = ["JsonBinaryMetadata", "JsonSharedCache"]
