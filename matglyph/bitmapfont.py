"""A tiny built-in bitmap font and a text rasterizer for it."""

from __future__ import annotations

from dataclasses import dataclass, field

from .keyutils import split_letters

BLANK = " "
BASELINE_MARK = "l"


@dataclass
class BitmapFontData:
    """A character raster of ``width`` x ``height`` cells.

    ``line_height`` is the number of rows down to and including the baseline,
    ``line_depth`` the number of rows below it.
    """

    width: int = 0
    height: int = 0
    line_height: int = 0
    line_depth: int = 0
    pixels: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must not be negative")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [BLANK] * size
        elif len(self.pixels) != size:
            raise ValueError(
                f"expected {size} pixels for {self.width}x{self.height}, "
                f"got {len(self.pixels)}"
            )

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height}")
        return x + y * self.width

    def get(self, x: int, y: int) -> str:
        """Return the cell at column ``x``, row ``y``."""
        return self.pixels[self._index(x, y)]

    def set(self, x: int, y: int, char: str) -> None:
        """Set the cell at column ``x``, row ``y``."""
        if len(char) != 1:
            raise ValueError("a cell holds exactly one character")
        self.pixels[self._index(x, y)] = char

    def rows(self) -> list[str]:
        """Return the raster as one string per row."""
        return [
            "".join(self.pixels[y * self.width : (y + 1) * self.width])
            for y in range(self.height)
        ]

    def to_text(self) -> str:
        """Return the raster as newline separated rows."""
        return "\n".join(self.rows())


def parse_glyph(art: str) -> BitmapFontData:
    """Build a glyph from ASCII art.

    Each line is a row. The row that starts with ``l`` is the baseline; the
    mark itself counts as a blank cell. A single leading and trailing newline
    are ignored, and short rows are padded with blanks.
    """
    lines = art.split("\n")
    if len(lines) > 1 and lines[0] == "":
        lines = lines[1:]
    if lines and lines[-1] == "":
        lines = lines[:-1]

    baseline = len(lines) - 1
    for index, line in enumerate(lines):
        if line.startswith(BASELINE_MARK):
            baseline = index
            lines[index] = BLANK + line[1:]
            break

    width = max((len(line) for line in lines), default=0)
    height = len(lines)
    pixels = [cell for line in lines for cell in line.ljust(width, BLANK)]
    line_height = baseline + 1 if lines else 0
    return BitmapFontData(
        width=width,
        height=height,
        line_height=line_height,
        line_depth=height - line_height,
        pixels=pixels,
    )


def _art(*rows: str) -> str:
    return "\n".join(rows)


_GLYPH_ART: dict[str, str] = {
    " ": _art("l  "),
    "0": _art("  ", "  xx", " x  x", " x  x", " x  x", " x  x", "l xx"),
    "1": _art("  x", " xx", "  x", "  x", "  x", "  x", "lxxx"),
    "2": _art("  xx", " x  x", "    x", "   x", "  x", " x", "lxxxx"),
    "3": _art(" xxxx", "    x", "   x", "    x", "    x", " x  x", "l xx"),
    "4": _art(" x  x", " x  x", " xxxx", "    x", "    x", "    x", "l   x"),
    "5": _art(" xxxx", " x", " xxx", "    x", "    x", " x  x", "l xx"),
    "6": _art("  xx", " x", " xxx", " x  x", " x  x", " x  x", "l xx"),
    "7": _art(" xxxx", "    x", "   x", "  x", "  x", "  x", "l x"),
    "8": _art("  xx", " x  x", "  xx", " x  x", " x  x", " x  x", "l xx"),
    "9": _art("  xx", " x  x", " x  x", "  xxx", "    x", "    x", "l xx"),
    "a": _art("  xx", " x  x", " x  x", "l xxx"),
    "A": _art("  xx", " x  x", " x  x", " xxxx", " x  x", "lx  x"),
    "b": _art(" x", " x", " xxx", " x  x", " x  x", "lxxx"),
    "B": _art(" xx", " x x", " xxx", " x  x", " x  x", "lxxx"),
    "c": _art("  xx", " x  ", " x  x", "l xx"),
    "C": _art("  xx", " x  x", " x", " x  ", " x  x", "l xx"),
    "d": _art("    x", "    x", "  xxx", " x  x", " x  x", "l xxx"),
    "D": _art(" xxx", " x  x", " x  x", " x  x", " x  x", "lxxx"),
    "e": _art("  xxx", " xxxxx", " x  ", "l xxx"),
    "E": _art(" xxxx", " x", " x ", " xxx", " x  ", "lxxxx"),
    "f": _art("  xxx", " x", " xxx", " x", " x  ", "lx"),
    "F": _art(" xxxx", " x", " x ", " xxx", " x  ", "lx"),
    "g": _art("  xxx", " x  x", " x  x", "l xxx", "    x", "  xx"),
    "G": _art("  xx", " x  x", " x ", " x xx", " x  x", "l xx"),
    "h": _art(" x", " x", " xxx", " x  x", "lx  x"),
    "H": _art(" x  x", " x  x", " xxxx", " x  x", " x  x", "lx  x"),
    "i": _art(" x", " ", " x", " x", " x", "lx"),
    "I": _art(" xxx", "  x", "  x", "  x", "  x", "lxxx "),
    "j": _art(" x", " ", " x", " x", " x", "lx", " x", "x "),
    "J": _art("  xxx", "    x", "    x", "    x", " x  x", "l xx "),
    "k": _art(" x", " x  x", " x x", " xx ", " x x", "lx  x"),
    "K": _art(" x  x", " x x", " xx", " x x", " x  x", "lx   x"),
    "l": _art(" xx", "  x", "  x", "  x", "  x", "lxxx"),
    "L": _art(" xx", "  x", "  x", "  x", "  x   x", "lxxxxxx "),
    "m": _art(" xx x ", " x x x", " x x x", "lx   x"),
    "M": _art(
        " x     x", " xx   xx", " x x x x", " x  x  x", " x     x", "lxx   xx"
    ),
    "n": _art(" xxxx ", " x   x", " x   x", "lx   x"),
    "N": _art(" x   xx", " xx   x", " x x  x", " x  x x", " x   xx", "lxx   x"),
    "o": _art("  xxx ", " x   x", " x   x", "l xxx"),
    "p": _art(" xxx ", " x  x", " x  x", "lxxx", " x", " x"),
    "P": _art(" xxxx", " x   x", " x   x", " xxxx", " x", "lx"),
    "q": _art("  xxxx", " x   x", " x   x", "l xxxx", "     x", "     x"),
    "r": _art(" xxx ", " x  x", " x", "lx"),
    "R": _art(" xxxx", " x   x", " x   x", " xxxx", " x  x", "lx   x"),
    "s": _art("  xx ", " x  ", "  xx", "    x", "lxxx"),
    "S": _art("  xxx", " x   x", " x   ", "  xxx", "     x", " x   x", "l xxx"),
    "t": _art(" xx", "  x", "  x", " xxx ", "  x", "  x", "l xx"),
    "T": _art(" xxxxx", " x x x", "   x   ", "   x", "   x", "   x", "l xxx"),
    "u": _art(" x   x ", " x   x", " x   x", "l xxxx"),
    "U": _art(" x    x", " x    x", " x    x", " x    x", " x    x", "l xxxxx"),
    "v": _art(" x   x ", " x   x", "  x x", "l  x"),
    "V": _art(" x   x", " x   x", " x   x", " x   x", "  x x", "l  x"),
    "w": _art(" x       x", " x   x   x", "  x x x x", "l  x   x"),
    "W": _art(
        " x       x",
        " x       x",
        " x   x   x",
        " x   x   x",
        "  x x x x",
        "l  x   x",
    ),
    "x": _art(" x   x ", "  x x ", "   x", "  x x", "lx   x"),
    "X": _art(" x   x", "  x x", "   x", "  x x", " x   x", "lx   x"),
    "y": _art(" x  x ", " x  x", " x  x", "l xxx", "    x", "    x", "   x"),
    "Y": _art(" x   x", " x   x", "  x x", "   x", "   x", "   x", "l  x"),
    "z": _art(" xxxx ", "   x", "  x", "lxxxx"),
    "Z": _art(" xxxxx", " x   x", "    x", "   x", "  x", " x   x", "lxxxxx"),
    "-": _art(" xxx", "  ", " ", "l"),
    "+": _art("  x", "  x", "xxxxx", "  x", "  x", "l"),
    ".": _art("lx"),
    ":": _art(" x", " ", " ", "lx"),
    "=": _art(" xxx", " ", " ", "lxxx"),
    ",": _art("lx", " x"),
    ";": _art(" x", " ", " ", " ", "lx", " x"),
    "!": _art(" xx", " x", " x", " x", " x", "", "lx"),
    "/": _art("   x", "   x", "  x", "  x", " x", "lx"),
    "|": _art(" x", " x", " x", " x", " x", "lx"),
    "\\": _art(" x", " x", "  x", "  x", "   x", "l  x"),
    "?": _art(" xx", "x  x", "  x", "  x", "   ", "l x"),
    "ä": _art(" x x", "", "  xx", " x  x", " x  x", "l xxx"),
    "Ä": _art(" x  x", "", "  xx", " x  x", " x  x", " xxxx", " x  x", "lx  x"),
    "å": _art("  xx", "", "  xx", " x  x", " x  x", "l xxx"),
    "Å": _art("  xx", "", "  xx", " x  x", " x  x", " xxxx", " x  x", "lx  x"),
    "ö": _art("  x x", " ", "  xxx ", " x   x", " x   x", "l xxx"),
    "Ö": _art(
        "  x x ", "", "  xxx", " x   x", " x   x", " x   x", " x   x", "l xxx"
    ),
}

_GLYPHS: dict[str, BitmapFontData] = {
    letter: parse_glyph(art) for letter, art in _GLYPH_ART.items()
}


def glyph_for(letter: str) -> BitmapFontData:
    """Return the glyph of a letter; letters without one get an empty glyph."""
    glyph = _GLYPHS.get(letter)
    if glyph is None:
        return BitmapFontData()
    return BitmapFontData(
        width=glyph.width,
        height=glyph.height,
        line_height=glyph.line_height,
        line_depth=glyph.line_depth,
        pixels=list(glyph.pixels),
    )


def render_text(text: str) -> BitmapFontData:
    """Rasterize ``text`` on one line with all glyphs sharing a baseline."""
    glyphs = [glyph_for(letter) for letter in split_letters(text)]

    line_height = max([1, *(g.line_height for g in glyphs)])
    line_depth = max([0, *(g.line_depth for g in glyphs)])
    width = sum(g.width for g in glyphs)
    height = line_height + line_depth

    result = BitmapFontData(
        width=width,
        height=height,
        line_height=line_height,
        line_depth=height - line_height,
    )

    raster_x = 0
    for glyph in glyphs:
        offset_y = line_height - glyph.line_height
        for y, row in enumerate(glyph.rows()):
            for x, cell in enumerate(row):
                result.set(x + raster_x, y + offset_y, cell)
        raster_x += glyph.width
    return result