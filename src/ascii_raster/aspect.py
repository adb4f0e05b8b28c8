"""Derive the missing output dimension from the source aspect ratio."""

import dataclasses
import logging
import math

from .config import Config

LOG = logging.getLogger("ascii_raster.aspect")

# Character cells are roughly twice as tall as they are wide.
CELL_ASPECT = 2.0


def round_half_up(x: float) -> int:
    """Round to nearest, ties away from zero (0.5 -> 1, -0.5 -> -1)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _derive_height(width: int, source_width: int, source_height: int) -> int:
    return round_half_up(width * source_height / (CELL_ASPECT * source_width))


def _derive_width(height: int, source_width: int, source_height: int) -> int:
    return round_half_up(CELL_ASPECT * height * source_width / source_height)


def resolve_dimensions(config: Config, source_width: int, source_height: int) -> Config:
    """
    Return a copy of ``config`` with both output dimensions fixed.

    When the derived dimension rounds to zero the fixed one is grown by one
    and the derived one recomputed. Each step raises the derived value by at
    least ``source_height / source_width / 2`` (or the reciprocal), so the
    loop ends after at most ``max(source_width, source_height)`` steps.
    """
    if config.resolved:
        return config

    width, height = config.width, config.height

    if config.auto_height:
        height = _derive_height(width, source_width, source_height)
        while height < 1:
            width += 1
            height = _derive_height(width, source_width, source_height)
    else:
        width = _derive_width(height, source_width, source_height)
        while width < 1:
            height += 1
            width = _derive_width(height, source_width, source_height)

    LOG.debug(
        "Resolved output size %dx%d for source %dx%d",
        width,
        height,
        source_width,
        source_height,
    )

    return dataclasses.replace(
        config, width=width, height=height, auto_width=False, auto_height=False
    )
