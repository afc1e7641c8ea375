#!/usr/bin/env python3

"""Type-encoding parsing services."""

from .type_encoding_classifier import (
    EncodingStyle,
    ReferenceKind,
    TypeEncodingClassifier,
    TypeReference,
)
from .type_encoding_decoder import decode_type_encoding, format_ivar_declaration

__all__ = [
    "EncodingStyle",
    "ReferenceKind",
    "TypeEncodingClassifier",
    "TypeReference",
    "decode_type_encoding",
    "format_ivar_declaration",
]
