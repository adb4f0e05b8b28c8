"""Exception types raised by the conversion pipeline."""


class AsciiRasterError(Exception):
    """Base class for every error raised by ascii_raster."""


class InvalidConfiguration(AsciiRasterError, ValueError):
    """Bad palette, bad explicit dimension or unusable source descriptor."""


class AllocationFailure(AsciiRasterError, MemoryError):
    """The accumulator grid could not be allocated for the requested size."""


class SourceError(AsciiRasterError):
    """An input image could not be read or decoded."""
