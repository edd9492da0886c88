"""Basic views: a base view, buttons, labels, knobs and images."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from .application import MouseButton, Signal
from .draw import Color, DrawCommand, DrawStyle, Paint, Renderer, Vec
from .font import Alignment, Font, FontView

PI2 = 2 * math.pi
DEFAULT_FONT_SIZE = 30


def _overlay(base: Paint, top: Paint) -> Paint:
    return replace(
        base,
        fill=top.fill if top.fill is not None else base.fill,
        line=top.line if top.line is not None else base.line,
    )


class View:
    """A rectangular area with a style that changes on hover and focus."""

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.width = 0.0
        self.height = 0.0
        self.weight = 1.0
        self.style = Paint()
        self.hover_style = Paint()
        self.focus_style = Paint()
        self.current_style = Paint()
        self.hovered = False
        self.focused = False

    def place(self, x: float, y: float, width: float, height: float) -> None:
        """Set position and size."""
        self.x, self.y, self.width, self.height = x, y, width, height

    def update_style(self) -> None:
        """Recompute the current style from base, focus and hover styles."""
        style = self.style
        if self.focused:
            style = _overlay(style, self.focus_style)
        if self.hovered:
            style = _overlay(style, self.hover_style)
        self.current_style = style

    def draw_basic_view(self, renderer: Renderer) -> list[DrawCommand]:
        """Draw the background and border of the view."""
        if self.current_style.fill is None and self.current_style.line is None:
            return []
        return renderer.draw_rect(
            self.x, self.y, self.width, self.height, self.current_style
        )

    def draw(self, renderer: Renderer) -> None:
        """Draw the view."""
        self.draw_basic_view(renderer)


class Button(View):
    """A clickable view showing a centred text."""

    def __init__(self, label: str = "") -> None:
        super().__init__()
        self.font_view = FontView(label, Font(DEFAULT_FONT_SIZE))
        self.clicked = Signal()
        self.hover_style.fill = Color(1, 1, 1, 0.1)
        self.style.line = Color(1, 1, 1, 0.3)
        self.focus_style.line = Color(1, 1, 1, 0.8)
        self.update_style()

    @property
    def label(self) -> str:
        return self.font_view.text

    @label.setter
    def label(self, text: str) -> None:
        self.font_view.text = text

    @property
    def font(self) -> Font:
        return self.font_view.font

    @font.setter
    def font(self, font: Font) -> None:
        self.font_view.font = font

    def draw(self, renderer: Renderer) -> None:
        self.draw_basic_view(renderer)
        if self.font_view:
            self.font_view.draw(
                renderer, self.x + self.width / 2.0, self.y + self.height / 2.0
            )


class Label(View):
    """A view showing a text, aligned left, centre or right."""

    def __init__(self, label: str = "") -> None:
        super().__init__()
        self.font_view = FontView(label, Font(DEFAULT_FONT_SIZE))

    @property
    def label(self) -> str:
        return self.font_view.text

    @label.setter
    def label(self, text: str) -> None:
        self.font_view.text = text

    @property
    def alignment(self) -> Alignment:
        return self.font_view.alignment

    @alignment.setter
    def alignment(self, value: Alignment) -> None:
        self.font_view.alignment = Alignment(value)

    def draw(self, renderer: Renderer) -> None:
        self.draw_basic_view(renderer)
        if self.font_view:
            half_width = self.width / 2.0
            self.font_view.draw(
                renderer,
                self.x + half_width * (1.0 - int(self.font_view.alignment)),
                self.y + self.height / 2.0,
            )


class KnobView(View):
    """A round control whose value follows the angle of the pointer."""

    def __init__(
        self, minimum: float = 0.0, maximum: float = 1.0, step: float = 0.01
    ) -> None:
        super().__init__()
        if maximum <= minimum:
            raise ValueError("maximum must be greater than minimum")
        if step < 0:
            raise ValueError("step must not be negative")
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self.value = minimum
        self.changed = Signal()
        self.indicator_style = Paint(fill=Color(1, 1, 1, 0.5))
        self.hover_style.fill = Color(1, 1, 1, 0.1)
        self.style.line = Color(1, 1, 1, 0.3)
        self.update_style()

    def amount(self, fraction: float) -> float:
        """Set the value from a 0..1 fraction of the range, snapped to the step."""
        fraction = min(max(fraction, 0.0), 1.0)
        span = self.maximum - self.minimum
        offset = fraction * span
        if self.step:
            offset = round(offset / self.step) * self.step
        self.value = min(max(self.minimum + offset, self.minimum), self.maximum)
        return self.value

    def on_pointer_down(
        self, pointer_id: int, button: MouseButton, x: float, y: float
    ) -> bool:
        self.on_pointer_move(pointer_id, x, y, int(button))
        return True

    def on_pointer_up(
        self, pointer_id: int, button: MouseButton, x: float, y: float
    ) -> bool:
        return True

    def on_pointer_move(self, pointer_id: int, x: float, y: float, state: int) -> bool:
        if not state:
            return False
        fraction = (
            math.atan2(x - self.width / 2, -y + self.height / 2) / PI2 + 0.5
        )
        # A little extra so the top of the range can be reached.
        fraction *= 1.0 + self.step / (self.maximum - self.minimum)
        self.amount(fraction)
        self.changed.emit(self.value)
        return True

    def draw(self, renderer: Renderer) -> None:
        middle_x = self.width / 2.0
        middle_y = self.height / 2.0
        radius = min(self.width, self.height) * (0.8 / 2)
        renderer.draw_ellipse(
            self.x + middle_x - radius,
            self.y + middle_y - radius,
            radius * 2,
            radius * 2,
            self.current_style,
        )
        fraction = (self.value - self.minimum) / (self.maximum - self.minimum)
        small = radius * 0.1
        angle = fraction * PI2
        renderer.draw_ellipse(
            self.x + middle_x - radius * math.sin(angle) - small,
            self.y + middle_y + radius * math.cos(angle) - small,
            small * 2,
            small * 2,
            self.indicator_style,
        )


@dataclass(frozen=True)
class Image:
    """The raw content of an image file."""

    path: Path
    data: bytes


class ImageView(View):
    """A view that stretches an image over its whole area."""

    def __init__(self, filename: Optional[Union[str, Path]] = None) -> None:
        super().__init__()
        self.image: Optional[Image] = None
        if filename is not None:
            self.load_image(filename)

    def load_image(self, filename: Union[str, Path]) -> Image:
        """Read the image file; raises OSError if it cannot be read."""
        path = Path(filename)
        self.image = Image(path, path.read_bytes())
        return self.image

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_texture_rect(
            Vec(self.x, self.y),
            0.0,
            self.width,
            self.height,
            self.image,
            DrawStyle.ORIGO_TOP_LEFT,
        )