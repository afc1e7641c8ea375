#!/usr/bin/env python3

"""Render-time models for generated headers."""

from dataclasses import dataclass, field
from pathlib import Path

from .imports import Imports
from .protocol_descriptor import ProtocolIdentity


@dataclass
class HeaderInfo:
    """Everything needed to render and write one header file."""

    path: Path
    tool_version: str
    build_versions: list[str]
    source_version: str
    name: str
    body: str
    imports: Imports = field(default_factory=Imports)
    is_umbrella: bool = False


@dataclass
class ModuleImports:
    """Normalized imports for every entity of one module."""

    classes: dict[str, Imports] = field(default_factory=dict)
    protocols: dict[ProtocolIdentity, Imports] = field(default_factory=dict)
    categories: dict[str, Imports] = field(default_factory=dict)  # keyed by header stem

    def for_class(self, name: str) -> Imports:
        return self.classes.get(name, Imports())

    def for_protocol(self, identity: ProtocolIdentity) -> Imports:
        return self.protocols.get(identity, Imports())

    def for_category(self, header_stem: str) -> Imports:
        return self.categories.get(header_stem, Imports())
