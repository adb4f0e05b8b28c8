"""
Scanline resampling.

Source scanlines arrive top to bottom and are folded into a fixed-size grid
of summed intensities. Columns are picked nearest-neighbour through a lookup
table built once per image; rows are mapped with a cursor that replicates a
scanline into every destination row it skipped over (upsampling) and stacks
scanlines that land on the same destination row (downsampling).
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import numpy as np

from .aspect import round_half_up
from .errors import AllocationFailure, InvalidConfiguration

LOG = logging.getLogger("ascii_raster.accumulator")

MAX_SAMPLE = 255.0


@dataclass(frozen=True)
class SourceDescriptor:
    width: int
    height: int
    components: int

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration(
                f"Invalid source dimensions {self.width}x{self.height}"
            )
        if self.height == 1:
            # (height - 1) is the row scale denominator
            raise InvalidConfiguration("Single-row source images are not supported")
        if not 1 <= self.components <= 4:
            raise InvalidConfiguration(
                f"Unsupported number of color components: {self.components}"
            )

    @property
    def row_stride(self) -> int:
        return self.width * self.components


def pixel_intensities(samples: np.ndarray, components: int) -> np.ndarray:
    """
    samples: 1-D uint8 buffer of whole pixels
    returns float64 intensities in [0,1], unweighted mean of the components
    """
    pixels = samples.reshape(-1, components).astype(np.float64)
    return pixels.sum(axis=1) / (MAX_SAMPLE * components)


class Accumulator:
    """Summed intensities for one image. Not reusable across images."""

    def __init__(self, source: SourceDescriptor, width: int, height: int):
        if width < 1 or height < 1:
            raise InvalidConfiguration(f"Invalid output size {width}x{height}")

        self.source = source
        self.width = width
        self.height = height

        try:
            self.sums = np.zeros((height, width), dtype=np.float64)
            self.row_counts = np.zeros(height, dtype=np.int64)
            self.column_map = np.zeros(width, dtype=np.int64)
        except (MemoryError, ValueError) as exc:
            self.sums = self.row_counts = self.column_map = None
            raise AllocationFailure(
                f"Not enough memory for output dimension {width}x{height}"
            ) from exc

        self.row_scale = (height - 1) / (source.height - 1)
        self.column_scale = source.width / width

        columns = np.floor(np.arange(width) * self.column_scale).astype(np.int64)
        self.column_map[:] = columns * source.components

        # offsets of every component of every sampled pixel within a scanline
        self._gather = (
            self.column_map[:, None] + np.arange(source.components)[None, :]
        ).reshape(-1)

        self.cursor = 0
        self.rows_seen = 0

        LOG.debug(
            "Allocated %dx%d grid (row_scale=%.4f column_scale=%.4f)",
            width,
            height,
            self.row_scale,
            self.column_scale,
        )

    def target_row(self, row_index: int) -> int:
        return round_half_up(self.row_scale * row_index)

    def sample(self, scanline) -> np.ndarray:
        """Intensities of the pixels selected by ``column_map`` in one scanline."""
        if isinstance(scanline, (bytes, bytearray, memoryview)):
            buf = np.frombuffer(scanline, dtype=np.uint8)
        else:
            buf = np.asarray(scanline, dtype=np.uint8).reshape(-1)
        if buf.shape[0] != self.source.row_stride:
            raise ValueError(
                f"Scanline has {buf.shape[0]} samples, expected {self.source.row_stride}"
            )
        return pixel_intensities(buf[self._gather], self.source.components)

    def add_scanline(self, row_index: int, scanline) -> None:
        if row_index != self.rows_seen:
            raise ValueError(
                f"Scanlines must arrive in order: got row {row_index}, expected {self.rows_seen}"
            )
        if row_index >= self.source.height:
            raise ValueError(f"Source has only {self.source.height} rows")

        values = self.sample(scanline)
        target = self.target_row(row_index)

        if self.cursor > target:
            # rows behind the cursor only take scanlines that map onto them
            self.sums[target] += values
            self.row_counts[target] += 1
        else:
            # catch up: fill every row up to and including the target
            while self.cursor <= target:
                self.sums[self.cursor] += values
                self.row_counts[self.cursor] += 1
                self.cursor += 1

        self.rows_seen += 1

    def consume(
        self,
        scanlines: Iterable,
        progress: Optional[Callable[[int, int], None]] = None,
    ) -> "Accumulator":
        for row_index, scanline in enumerate(scanlines):
            self.add_scanline(row_index, scanline)
            if progress is not None:
                progress(row_index + 1, self.source.height)

        if self.rows_seen != self.source.height:
            LOG.warning(
                "Source ended after %d of %d scanlines", self.rows_seen, self.source.height
            )
        return self
