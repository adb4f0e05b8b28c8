"""`ascii-raster <command>` dispatcher."""

import importlib
import sys
from typing import Optional, Sequence

PROG = "ascii-raster"

# command -> module exposing main(argv)
COMMANDS = {
    "convert": "ascii_raster.image_to_ascii",
    "palettes": "ascii_raster.palettes",
}


def usage(prog: str = PROG, file=None) -> None:
    file = file or sys.stdout
    print(f"Usage: {prog} <command> [args...]", file=file)
    print(f"Commands: {', '.join(sorted(COMMANDS))}", file=file)


def run_command(entry, argv: Sequence[str]) -> int:
    """Call a command's main, turning SystemExit and stray errors into exit codes."""
    try:
        result = entry(list(argv))
    except SystemExit as se:
        return se.code if isinstance(se.code, int) else 0
    except Exception as e:
        print(f"Error running command: {e}", file=sys.stderr)
        return 1
    return 0 if result is None else result


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv or argv[0] in ("-h", "--help"):
        usage()
        return 0

    cmd, *args = argv
    module_path = COMMANDS.get(cmd)
    if not module_path:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        usage()
        return 2

    try:
        module = importlib.import_module(module_path)
    except Exception as e:
        print(f"Failed to import command '{cmd}' ({module_path}): {e}", file=sys.stderr)
        return 3

    entry = getattr(module, "main", None)
    if not callable(entry):
        print(f"Command module '{module_path}' has no callable 'main'", file=sys.stderr)
        return 4

    return run_command(entry, args)


if __name__ == "__main__":
    raise SystemExit(main())
