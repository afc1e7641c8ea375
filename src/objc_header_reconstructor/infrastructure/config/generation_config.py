#!/usr/bin/env python3

"""Tunables for header generation with environment overrides."""

import os
from typing import Any

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    # Header banner
    "TOOL_NAME": "objc-header-reconstructor",

    # Dependency expansion
    "PRIVATE_FRAMEWORK_MARKER": "PrivateFrameworks",

    # Import reconstruction
    "ROOT_CLASS": "NSObject",
    "ROOT_FRAMEWORK": "Foundation",

    # Output
    "DIRECTORY_MODE": 0o750,
    "UMBRELLA_SUFFIX": "-Umbrella",
}

# Images scanned to build the Foundation suppression index
FOUNDATION_IMAGES = ("Foundation", "CoreFoundation")


def get_config() -> dict[str, Any]:
    """Get configuration with environment variable overrides.

    Each key can be overridden with an ``OBJC_<KEY>`` variable.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"OBJC_{key}")
        if env_value is None:
            continue
        if isinstance(config[key], int):
            try:
                config[key] = int(env_value, 0)
            except ValueError:
                pass
        else:
            config[key] = env_value

    return config
