#!/usr/bin/env python3

"""Domain layer containing business logic and models."""

from . import errors, models, repositories, services

__all__ = [
    "errors",
    "models",
    "repositories",
    "services",
]
