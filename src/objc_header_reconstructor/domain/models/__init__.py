#!/usr/bin/env python3

"""Domain models."""

from . import objc

__all__ = ["objc"]
