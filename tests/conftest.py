"""Shared fixtures: small synthetic images."""

import logging

import numpy as np
import pytest
from PIL import Image


def gray_image(rows):
    """Build an 'L' image from a nested list of 0..255 samples."""
    return Image.fromarray(np.array(rows, dtype=np.uint8))


@pytest.fixture
def white_8x8():
    return gray_image([[255] * 8 for _ in range(8)])


@pytest.fixture
def black_over_white():
    """4x2: top row black, bottom row white."""
    return gray_image([[0] * 4, [255] * 4])


@pytest.fixture
def png_path(tmp_path, white_8x8):
    path = tmp_path / "white.png"
    white_8x8.save(path)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI installs handlers on the package logger; drop them after each test."""
    yield
    logger = logging.getLogger("ascii_raster")
    logger.handlers[:] = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
