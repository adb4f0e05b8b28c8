#!/usr/bin/env python3
"""Convert images to ASCII art."""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from . import __version__
from .config import DEFAULT_HTML_FONT_SIZE, DEFAULT_WIDTH, Config, parse_size
from .errors import AsciiRasterError, InvalidConfiguration
from .palettes import PRESETS, make_palette
from .pipeline import convert_location
from .render import write_lines

LOG = logging.getLogger("ascii_raster")

PROGRESS_BAR_LENGTH = 56


# -----------------------------
# Logging / progress
# -----------------------------
def setup_logging(level: int, log_path: Optional[str] = None) -> None:
    LOG.setLevel(logging.DEBUG if log_path else level)

    handlers: List[logging.Handler] = []

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handlers.append(sh)

    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
        handlers.append(fh)

    LOG.handlers[:] = handlers
    LOG.propagate = False


def progress_bar(done: int, total: int, stream=None) -> None:
    stream = stream or sys.stderr
    filled = int(PROGRESS_BAR_LENGTH * done / total + 0.5)
    bar = "#" * filled + "." * (PROGRESS_BAR_LENGTH - filled)
    stream.write(f"Decompressing image [{bar}]\r")
    if done == total:
        stream.write("\n")
    stream.flush()


# -----------------------------
# CLI
# -----------------------------
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ascii-raster convert",
        description="Convert images to ASCII art",
        epilog=f"The default running mode is `--width={DEFAULT_WIDTH}'.",
    )
    ap.add_argument(
        "inputs",
        nargs="*",
        metavar="FILE",
        help="Image paths, URLs, or - to read from standard input",
    )
    ap.add_argument(
        "-o", "--output", default=None, help="Output text file (default: stdout)"
    )

    ap.add_argument("-b", "--border", action="store_true", help="Print a border around the output image")
    ap.add_argument(
        "--chars",
        default=None,
        help="Character palette, darkest first. At least two characters. Overrides --palette.",
    )
    ap.add_argument(
        "--palette",
        choices=sorted(PRESETS),
        default="default",
        help="Built-in palette preset",
    )
    ap.add_argument("--flipx", action="store_true", help="Flip image in X direction")
    ap.add_argument("--flipy", action="store_true", help="Flip image in Y direction")
    ap.add_argument("--width", type=int, default=None, help="Output width, height from aspect ratio")
    ap.add_argument("--height", type=int, default=None, help="Output height, width from aspect ratio")
    ap.add_argument("--size", default=None, metavar="WxH", help="Output width and height")
    ap.add_argument("--html", action="store_true", help="Produce XHTML 1.0 output")
    ap.add_argument(
        "--html-fontsize",
        type=int,
        default=DEFAULT_HTML_FONT_SIZE,
        help=f"Font size in pt for --html (default: {DEFAULT_HTML_FONT_SIZE})",
    )
    ap.add_argument(
        "-i",
        "--invert",
        action="store_true",
        help="Invert output image (useful for dark backgrounds)",
    )

    ap.add_argument("-v", "--verbose", action="store_true", help="Report sizes and show progress")
    ap.add_argument("-d", "--debug", action="store_true", help="Print debug information")
    ap.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)",
    )
    ap.add_argument("--log", default=None, metavar="FILE", help="Also write a debug log to FILE")
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def config_from_args(args) -> Config:
    palette = args.chars if args.chars is not None else make_palette(args.palette)
    size = parse_size(args.size) if args.size else None
    return Config.from_options(
        width=args.width,
        height=args.height,
        size=size,
        palette=palette,
        invert=args.invert,
        flip_x=args.flipx,
        flip_y=args.flipy,
        border=args.border,
        html=args.html,
        html_font_size=args.html_fontsize,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.log_level:
        level = getattr(logging, args.log_level)
    elif args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    setup_logging(level, args.log)

    if not args.inputs:
        print("No files specified.\n", file=sys.stderr)
        ap.print_help(sys.stderr)
        return 1

    try:
        config = config_from_args(args)
    except InvalidConfiguration as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    LOG.debug("Config: %s", config)
    progress = progress_bar if args.verbose else None

    try:
        out = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
    except OSError as e:
        print(f"Error: can't write {args.output}: {e.strerror or e}", file=sys.stderr)
        return 1

    try:
        for location in args.inputs:
            try:
                lines = convert_location(location, config, progress=progress)
            except AsciiRasterError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1
            write_lines(lines, out)
    finally:
        if out is not sys.stdout:
            out.close()
        else:
            out.flush()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
