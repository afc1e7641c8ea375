"""Application-level generators."""

from .base_generator import BaseGenerator
from .objc_dumper import EntityKind, ObjcDumper
from .objc_generator import ModuleResult, ObjcHeaderGenerator

__all__ = [
    "BaseGenerator",
    "EntityKind",
    "ModuleResult",
    "ObjcDumper",
    "ObjcHeaderGenerator",
]
