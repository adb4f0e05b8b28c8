"""Decode images into scanlines with Pillow."""

import io
import logging
import os
import sys
from typing import Iterator
from urllib.parse import unquote, urlparse

import numpy as np
import requests
from PIL import Image, UnidentifiedImageError

from .accumulator import SourceDescriptor
from .errors import SourceError

LOG = logging.getLogger("ascii_raster.source")

URL_SCHEMES = ("http://", "https://")

# requests has no transport for these
UNSUPPORTED_SCHEMES = ("ftp://", "ftps://", "tftp://")

# Pillow mode -> components per pixel
_COMPONENTS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


def is_url(location: str) -> bool:
    return location.lower().startswith(URL_SCHEMES)


def _load(fp) -> Image.Image:
    img = Image.open(fp)
    img.load()
    return img


def open_image(location: str, timeout: float = 30.0) -> Image.Image:
    """
    Open an image from a path, ``file://`` URL, network URL or ``-`` (stdin).
    Raises SourceError on any read or decode failure.
    """
    try:
        if location == "-":
            LOG.debug("Reading image from standard input")
            return _load(io.BytesIO(sys.stdin.buffer.read()))

        if location.lower().startswith(UNSUPPORTED_SCHEMES):
            raise SourceError(f"Unsupported URL scheme: {location}")

        if is_url(location):
            LOG.info("URL: %s", location)
            r = requests.get(location, timeout=timeout)
            r.raise_for_status()
            return _load(io.BytesIO(r.content))

        if location.lower().startswith("file://"):
            location = unquote(urlparse(location).path)
            if os.name == "nt" and location.startswith("/"):
                location = location[1:]

        LOG.info("File: %s", location)
        return _load(location)
    except FileNotFoundError as exc:
        raise SourceError(f"Can't open {location}") from exc
    except UnidentifiedImageError as exc:
        raise SourceError(f"Not a recognised image: {location}") from exc
    except Image.DecompressionBombError as exc:
        raise SourceError(f"Image too large: {location}: {exc}") from exc
    except requests.RequestException as exc:
        raise SourceError(f"Could not download {location}: {exc}") from exc
    except OSError as exc:
        raise SourceError(f"Can't read {location}: {exc}") from exc


def normalize_mode(img: Image.Image) -> Image.Image:
    """Convert to one of L, LA, RGB, RGBA."""
    if img.mode in _COMPONENTS:
        return img
    if img.mode == "P":
        return img.convert("RGBA" if "transparency" in img.info else "RGB")
    if img.mode == "PA":
        return img.convert("RGBA")
    if img.mode in ("1", "I", "I;16", "F"):
        return img.convert("L")
    return img.convert("RGB")


class ScanlineSource:
    """Top-to-bottom scanlines of a decoded image as raw component bytes."""

    def __init__(self, image: Image.Image):
        self.image = normalize_mode(image)
        w, h = self.image.size
        self.descriptor = SourceDescriptor(
            width=w, height=h, components=_COMPONENTS[self.image.mode]
        )

    def __len__(self):
        return self.descriptor.height

    def __iter__(self) -> Iterator[bytes]:
        arr = np.asarray(self.image, dtype=np.uint8)
        rows = arr.reshape(self.descriptor.height, self.descriptor.row_stride)
        for row in rows:
            yield row.tobytes()
