"""Fonts, rasterized text images and buffered text views."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional

from .bitmapfont import BLANK, render_text
from .draw import DrawCommand, DrawStyle, Renderer, Vec

_DEFAULT_FONT_PATH = "font/Ubuntu-R.ttf"

_INK = bytes((255, 255, 255, 255))
_CLEAR = bytes((0, 0, 0, 0))


class Alignment(enum.IntEnum):
    """Horizontal text alignment relative to the drawing position."""

    RIGHT = -1
    CENTER = 0
    LEFT = 1


@dataclass(frozen=True)
class TextImage:
    """An RGBA image of a line of text, four bytes per pixel, rows top-down."""

    width: int
    height: int
    line_height: int
    pixels: bytes

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the RGBA value at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height}")
        start = (x + y * self.width) * 4
        r, g, b, a = self.pixels[start : start + 4]
        return (r, g, b, a)


def rasterize(text: str) -> TextImage:
    """Render ``text`` with the bitmap font into a white-on-transparent image."""
    raster = render_text(text)
    pixels = b"".join(_CLEAR if cell == BLANK else _INK for cell in raster.pixels)
    return TextImage(
        width=raster.width,
        height=raster.height,
        line_height=raster.line_height,
        pixels=pixels,
    )


def set_default_font_path(path: str) -> None:
    """Set the font file used by fonts created without an explicit path."""
    global _DEFAULT_FONT_PATH
    _DEFAULT_FONT_PATH = str(path)


def default_font_path() -> str:
    """Return the font file used by fonts created without an explicit path."""
    return _DEFAULT_FONT_PATH


class Font:
    """A font of a given size; a font created without a size is empty and false."""

    def __init__(self, size: Optional[int] = None, path: Optional[str] = None) -> None:
        self.size = size
        if size is None:
            self.path: Optional[str] = path
            self._loaded = False
        else:
            self.path = _DEFAULT_FONT_PATH if path is None else str(path)
            self._loaded = True

    def __bool__(self) -> bool:
        return self._loaded

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Font):
            return NotImplemented
        return (self._loaded, self.size, self.path) == (
            other._loaded,
            other.size,
            other.path,
        )

    def __hash__(self) -> int:
        return hash((self._loaded, self.size, self.path))

    def __repr__(self) -> str:
        return f"Font(size={self.size!r}, path={self.path!r})"

    def draw(
        self,
        renderer: Renderer,
        x: float,
        y: float,
        text: str,
        centered: int = 0,
    ) -> Optional[DrawCommand]:
        """Draw ``text`` directly, without buffering the rendered image."""
        return draw_text(renderer, self, x, y, text, int(centered))


def draw_text(
    renderer: Renderer,
    font: Optional[Font],
    x: float,
    y: float,
    text: str,
    alignment: int = 0,
) -> Optional[DrawCommand]:
    """Rasterize and draw ``text`` centred on (x, y), shifted by ``alignment`` half widths.

    Nothing is drawn when the font is missing or empty.
    """
    if not font:
        return None
    image = rasterize(text)
    return renderer.draw_texture_rect(
        Vec(x + image.width * int(alignment) / 2, y, 0.0),
        0.0,
        image.width,
        image.height,
        image,
        DrawStyle.CENTER_ORIGO,
    )


def _round_half_away(value: float) -> float:
    return float(math.copysign(math.floor(abs(value) + 0.5), value))


class FontView:
    """A piece of text whose rendered image is kept until text or font change."""

    def __init__(
        self,
        text: str = "",
        font: Optional[Font] = None,
        alignment: Alignment = Alignment.CENTER,
    ) -> None:
        self._text = str(text)
        self._font = font if font is not None else Font()
        self.alignment = Alignment(alignment)
        self.width = 0
        self.height = 0
        self.line_height = 0
        self.texture: Optional[TextImage] = None
        self.needs_update = True

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        value = str(value)
        if value != self._text:
            self._text = value
            self.needs_update = True

    @property
    def font(self) -> Font:
        return self._font

    @font.setter
    def font(self, value: Font) -> None:
        self._font = value
        self.needs_update = True

    def __bool__(self) -> bool:
        return bool(self._font)

    def __copy__(self) -> "FontView":
        duplicate = FontView(self._text, self._font, self.alignment)
        duplicate.width = self.width
        duplicate.height = self.height
        return duplicate

    def prepare(self) -> Optional[TextImage]:
        """Render the text if it changed; return the current image."""
        if not self._text or not self._font:
            return self.texture
        if self.needs_update:
            image = rasterize(self._text)
            self.texture = image
            self.line_height = image.line_height
            self.width = image.width
            self.height = image.height
            self.needs_update = False
        return self.texture

    def draw(self, renderer: Renderer, x: float, y: float) -> Optional[DrawCommand]:
        """Draw the text with its baseline at ``y``, placed by the alignment."""
        texture = self.prepare()
        if texture is None:
            return None
        x += self.width * (int(self.alignment) - 1) / 2.0
        return renderer.draw_texture_rect(
            Vec(_round_half_away(x), _round_half_away(y - self.line_height)),
            0.0,
            self.width,
            self.height,
            texture,
            DrawStyle.ORIGO_TOP_LEFT,
        )