"""ObjC Header Reconstructor - header reconstruction from ObjC runtime metadata."""

__version__ = "0.1.0"

from .application.generators import ObjcDumper, ObjcHeaderGenerator  # noqa: E402
from .infrastructure.config import Config  # noqa: E402
from .main import main  # noqa: E402

__all__ = ["Config", "ObjcDumper", "ObjcHeaderGenerator", "__version__", "main"]
