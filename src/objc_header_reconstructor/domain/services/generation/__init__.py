#!/usr/bin/env python3

"""Generation services for ObjC header creation."""

from .accessor_filter import strip_synthesized_members, transform_setter
from .declaration_renderer import DeclarationRenderer
from .dependency_resolver import DependencyResolver, method_argument_indices
from .foundation_index import build_foundation_index
from .header_assembler import HeaderAssembler, include_guard_name

__all__ = [
    "DeclarationRenderer",
    "DependencyResolver",
    "HeaderAssembler",
    "build_foundation_index",
    "include_guard_name",
    "method_argument_indices",
    "strip_synthesized_members",
    "transform_setter",
]
