#!/usr/bin/env python3
"""Named character palettes, ordered dark -> light."""

import argparse
import sys

from .config import DEFAULT_PALETTE

# -----------------------------
# Presets
# -----------------------------


def palette_dense():
    # Long ramp, good for large outputs.
    return " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"


def palette_simple():
    return " .:-=+*#%@"


def palette_blocks():
    # Needs a font with shading glyphs.
    return " ░▒▓█"


def palette_printable():
    # ASCII printable range
    return "".join(chr(i) for i in range(32, 127))


PRESETS = {
    "default": lambda: DEFAULT_PALETTE,
    "dense": palette_dense,
    "simple": palette_simple,
    "blocks": palette_blocks,
    "printable": palette_printable,
}


def make_palette(name: str) -> str:
    try:
        return PRESETS[name]()
    except KeyError:
        raise ValueError(f"Unknown palette: {name}") from None


# -----------------------------
# CLI
# -----------------------------
def main(argv=None):
    ap = argparse.ArgumentParser(
        prog="ascii-raster palettes", description="List the built-in palettes"
    )
    ap.add_argument("name", nargs="?", default=None, help="Print only this palette")
    args = ap.parse_args(argv)

    if args.name:
        try:
            print(make_palette(args.name))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    for name in PRESETS:
        print(f"{name:<10} {make_palette(name)!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
