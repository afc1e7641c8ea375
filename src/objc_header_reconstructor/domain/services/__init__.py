#!/usr/bin/env python3

"""Domain services layer."""

from . import generation, lookup, parsing

__all__ = [
    "generation",
    "lookup",
    "parsing",
]
