"""Resolved, immutable conversion settings."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidConfiguration

DEFAULT_WIDTH = 78
DEFAULT_PALETTE = "   ...',;:clodxkO0KXNWM"
DEFAULT_HTML_FONT_SIZE = 4


@dataclass(frozen=True)
class Config:
    width: int = DEFAULT_WIDTH
    height: int = 0
    auto_width: bool = False
    auto_height: bool = True

    palette: str = DEFAULT_PALETTE
    invert: bool = False
    flip_x: bool = False
    flip_y: bool = False

    border: bool = False
    html: bool = False
    html_font_size: int = DEFAULT_HTML_FONT_SIZE

    def __post_init__(self):
        if len(self.palette) < 2:
            raise InvalidConfiguration(
                "You must specify at least two characters in the palette"
            )
        if self.auto_width and self.auto_height:
            raise InvalidConfiguration("Width and height cannot both be derived")
        if (not self.auto_width and self.width < 1) or (
            not self.auto_height and self.height < 1
        ):
            raise InvalidConfiguration(
                f"Invalid width or height specified ({self.width}x{self.height})"
            )
        if self.html_font_size < 1:
            raise InvalidConfiguration(
                f"Invalid HTML font size: {self.html_font_size}"
            )

    @property
    def resolved(self) -> bool:
        return not (self.auto_width or self.auto_height)

    @classmethod
    def from_options(
        cls,
        width: Optional[int] = None,
        height: Optional[int] = None,
        size: Optional[Tuple[int, int]] = None,
        **flags,
    ) -> "Config":
        """
        Build a config from command-line shaped options.

        A lone width derives the height, a lone height derives the width,
        both (or ``size``) fix the grid, and neither falls back to
        ``DEFAULT_WIDTH`` with a derived height.
        """
        if size is not None:
            width, height = size

        if width is not None and height is not None:
            return cls(width=width, height=height, auto_width=False, auto_height=False, **flags)
        if height is not None:
            return cls(width=0, height=height, auto_width=True, auto_height=False, **flags)
        if width is None:
            width = DEFAULT_WIDTH
        return cls(width=width, height=0, auto_width=False, auto_height=True, **flags)


def parse_size(text: str) -> Tuple[int, int]:
    """Parse a ``WxH`` size argument."""
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise InvalidConfiguration(f"Invalid size {text!r}, expected WxH")
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidConfiguration(f"Invalid size {text!r}, expected WxH") from None
    return width, height
