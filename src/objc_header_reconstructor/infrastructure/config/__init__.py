"""Infrastructure configuration module."""

from .application_config import Config
from .generation_config import FOUNDATION_IMAGES, get_config

__all__ = ["Config", "FOUNDATION_IMAGES", "get_config"]
