"""One image in, lines of text out."""

import logging
import time
from typing import Callable, List, Optional

from .accumulator import Accumulator
from .aspect import resolve_dimensions
from .config import Config
from .normalizer import normalize
from .render import render
from .source import ScanlineSource, open_image

LOG = logging.getLogger("ascii_raster.pipeline")

Progress = Callable[[int, int], None]

DEFAULT_TITLE = "ascii-raster converted image"


def convert(
    source: ScanlineSource,
    config: Config,
    progress: Optional[Progress] = None,
    title: str = DEFAULT_TITLE,
) -> List[str]:
    """Resample, normalize and render every scanline of ``source``."""
    t0 = time.perf_counter()
    desc = source.descriptor
    resolved = resolve_dimensions(config, desc.width, desc.height)

    LOG.info("Source width: %d", desc.width)
    LOG.info("Source height: %d", desc.height)
    LOG.info("Source color components: %d", desc.components)
    LOG.info("Output width: %d", resolved.width)
    LOG.info("Output height: %d", resolved.height)
    LOG.info("Output palette (%d chars): '%s'", len(resolved.palette), resolved.palette)

    acc = Accumulator(desc, resolved.width, resolved.height)
    acc.consume(source, progress=progress)
    grid = normalize(acc.sums, acc.row_counts)
    lines = render(grid, resolved, title=title)

    LOG.debug("Converted in %.3fs", time.perf_counter() - t0)
    return lines


def convert_location(
    location: str,
    config: Config,
    progress: Optional[Progress] = None,
) -> List[str]:
    """Open ``location`` (path, URL or ``-``) and convert it."""
    img = open_image(location)
    with img:
        return convert(ScanlineSource(img), config, progress=progress)
