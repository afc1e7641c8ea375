#!/usr/bin/env python3

"""Infrastructure layer: configuration, logging and collaborator adapters."""

from . import config, logging

__all__ = [
    "config",
    "logging",
]
