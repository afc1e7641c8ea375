#!/usr/bin/env python3

"""Application layer orchestrating the domain services."""

from . import generators

__all__ = ["generators"]
