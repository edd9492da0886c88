"""Command that prints text in the built-in bitmap font."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .bitmapfont import render_text


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matglyph", description="Print text in the built-in bitmap font."
    )
    parser.add_argument("text", nargs="+", help="text to print")
    parser.add_argument(
        "--ink", default="x", help="character used for set pixels (default: x)"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the given text and print it row by row."""
    args = _parser().parse_args(argv)
    if len(args.ink) != 1:
        _parser().error("--ink must be a single character")
    raster = render_text(" ".join(args.text))
    for row in raster.rows():
        print(row.replace("x", args.ink))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())