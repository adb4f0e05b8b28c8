"""Map averaged intensities to palette characters and frame the result."""

import html
from typing import Iterable, List, TextIO

import numpy as np

from .config import Config


# -----------------------------
# Character selection
# -----------------------------
def palette_indices(grid: np.ndarray, palette_length: int, invert: bool = False) -> np.ndarray:
    """
    grid: HxW intensities, nominally in [0,1]
    returns HxW int palette indices in [0, palette_length - 1]
    """
    last = palette_length - 1
    scaled = last * np.asarray(grid, dtype=np.float64)
    # ties away from zero, same as aspect.round_half_up
    idx = np.copysign(np.floor(np.abs(scaled) + 0.5), scaled).astype(np.int64)
    idx = np.clip(idx, 0, last)
    if invert:
        idx = last - idx
    return idx


def render_body(grid: np.ndarray, config: Config) -> List[str]:
    """One line per grid row, flips applied, border bars added."""
    palette = config.palette
    idx = palette_indices(grid, len(palette), invert=config.invert)

    if config.flip_y:
        idx = idx[::-1]
    if config.flip_x:
        idx = idx[:, ::-1]

    lines = []
    for row in idx:
        line = "".join(palette[i] for i in row)
        if config.html:
            line = html.escape(line, quote=False)
        if config.border:
            line = f"|{line}|"
        lines.append(line)
    return lines


# -----------------------------
# Framing
# -----------------------------
def border_line(width: int) -> str:
    return "+" + "-" * width + "+"


def html_header(font_size: int, title: str = "ascii-raster converted image") -> List[str]:
    return [
        "<?xml version='1.0' encoding='UTF-8'?>",
        "<!DOCTYPE html PUBLIC '-//W3C//DTD XHTML 1.0 Strict//EN'"
        "  'http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd'>",
        "<html xmlns='http://www.w3.org/1999/xhtml' lang='en' xml:lang='en'>",
        "<head>",
        f"<title>{html.escape(title)}</title>",
        "<style type='text/css'>",
        ".ascii {",
        f"   font-size:{font_size}pt;",
        "}",
        "</style>",
        "</head>",
        "<body>",
        "<div class='ascii'>",
        "<pre>",
    ]


def html_footer() -> List[str]:
    return ["</pre>", "</div>", "</body>", "</html>"]


def render(
    grid: np.ndarray, config: Config, title: str = "ascii-raster converted image"
) -> List[str]:
    """
    Full output for one image, in order:
    html header, top border, body, bottom border, html footer.
    """
    out: List[str] = []
    if config.html:
        out.extend(html_header(config.html_font_size, title=title))
    if config.border:
        out.append(border_line(grid.shape[1]))

    out.extend(render_body(grid, config))

    if config.border:
        out.append(border_line(grid.shape[1]))
    if config.html:
        out.extend(html_footer())
    return out


def write_lines(lines: Iterable[str], stream: TextIO) -> None:
    for line in lines:
        stream.write(line + "\n")
