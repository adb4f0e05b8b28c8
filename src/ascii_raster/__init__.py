"""ascii-raster - Render raster images as ASCII art."""

__version__ = "0.2.0"

"""
Only lightweight names are imported here. The command modules are reached
through wrappers so that `python -m ascii_raster.<module>` does not find the
module already in `sys.modules` and warn.
"""

from .config import Config
from .errors import (
    AllocationFailure,
    AsciiRasterError,
    InvalidConfiguration,
    SourceError,
)


def convert_main(*args, **kwargs):
    from .image_to_ascii import main as _m

    return _m(*args, **kwargs)


def palettes_main(*args, **kwargs):
    from .palettes import main as _m

    return _m(*args, **kwargs)


__all__ = [
    "AllocationFailure",
    "AsciiRasterError",
    "Config",
    "InvalidConfiguration",
    "SourceError",
    "convert_main",
    "palettes_main",
]
