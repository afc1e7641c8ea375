#!/usr/bin/env python3

"""ObjC runtime metadata domain models."""

from .category_descriptor import CategoryDescriptor
from .class_descriptor import ClassDescriptor
from .foundation_index import FoundationIndex
from .header_info import HeaderInfo, ModuleImports
from .imports import (
    Imports,
    local_class_header,
    local_protocol_header,
    strip_header_suffix,
)
from .member_info import IvarInfo, PropertyInfo
from .method_info import FIRST_EXPLICIT_ARGUMENT, MethodInfo
from .protocol_descriptor import ProtocolDescriptor, ProtocolIdentity

__all__ = [
    "CategoryDescriptor",
    "ClassDescriptor",
    "FIRST_EXPLICIT_ARGUMENT",
    "FoundationIndex",
    "HeaderInfo",
    "Imports",
    "IvarInfo",
    "MethodInfo",
    "ModuleImports",
    "PropertyInfo",
    "ProtocolDescriptor",
    "ProtocolIdentity",
    "local_class_header",
    "local_protocol_header",
    "strip_header_suffix",
]
