"""Backend-neutral drawing: transforms, a viewport stack and recorded draw calls."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from .shaders import DEFAULT_ELLIPSE_POINTS

TRIANGLE_FAN = "triangle_fan"
LINE_LOOP = "line_loop"

Matrix = tuple[float, ...]


@dataclass(frozen=True)
class Vec:
    """A point in pixel coordinates with an optional depth."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


VecLike = Union[Vec, Sequence[float]]


def _as_vec(value: VecLike) -> Vec:
    if isinstance(value, Vec):
        return value
    return Vec(*value)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


@dataclass
class Paint:
    """How a shape is filled and outlined; ``None`` disables that part."""

    fill: Optional[Color] = None
    line: Optional[Color] = None
    line_width: float = 1.0


class DrawStyle(enum.IntFlag):
    """Where a texture quad has its origin."""

    ORIGO_TOP_LEFT = 0
    CENTER_ORIGO = 1


@dataclass(frozen=True)
class Viewport:
    """A viewport rectangle in window pixels, y measured from the bottom."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class DrawCommand:
    """One recorded drawing operation."""

    kind: str
    primitive: Optional[str] = None
    vertex_count: int = 0
    matrix: Matrix = ()
    color: Optional[Color] = None
    line_width: float = 1.0
    texture: object = None
    vertex_array: int = 0
    depth: bool = False


def _check_size(screen_width: float, screen_height: float) -> None:
    if not screen_width or not screen_height:
        raise ValueError("the viewport has no size; call set_dimensions first")


def line_matrix(
    v1: VecLike, v2: VecLike, screen_width: float, screen_height: float
) -> Matrix:
    """Column-major matrix mapping (0,0) to ``v1`` and (1,0) to ``v2`` in clip space."""
    _check_size(screen_width, screen_height)
    a, b = _as_vec(v1), _as_vec(v2)
    w, h = screen_width, screen_height
    return (
        (b.x - a.x) / w * 2.0, -(b.y - a.y) / h * 2.0, b.z - a.z, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        a.x / w * 2.0 - 1.0, -a.y / h * 2.0 + 1.0, a.z, 1.0,
    )


def triangle_matrix(
    v1: VecLike, v2: VecLike, v3: VecLike, screen_width: float, screen_height: float
) -> Matrix:
    """Column-major matrix mapping (0,0), (1,0), (0,1) to ``v1``, ``v2``, ``v3``."""
    _check_size(screen_width, screen_height)
    a, b, c = _as_vec(v1), _as_vec(v2), _as_vec(v3)
    w, h = screen_width, screen_height
    return (
        (b.x - a.x) / w * 2.0, -(b.y - a.y) / h * 2.0, b.z - a.z, 0.0,
        (c.x - a.x) / w * 2.0, -(c.y - a.y) / h * 2.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        a.x / w * 2.0 - 1.0, -a.y / h * 2.0 + 1.0, a.z, 1.0,
    )


@dataclass
class Renderer:
    """Records draw calls against a stack of viewports."""

    commands: list[DrawCommand] = field(default_factory=list)
    depth_enabled: bool = False
    clear_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    _viewports: list[Viewport] = field(default_factory=lambda: [Viewport()])

    def set_dimensions(self, width: int, height: int) -> None:
        """Set the size of the whole window; this is the base viewport."""
        self._viewports[0] = Viewport(0, 0, int(width), int(height))

    def push_viewport(self, x: int, y: int, width: int, height: int) -> Viewport:
        """Narrow drawing to a rectangle given with y measured from the top."""
        window_height = self._viewports[0].height
        viewport = Viewport(x, -y + (window_height - height), width, height)
        self._viewports.append(viewport)
        return viewport

    def pop_viewport(self) -> Viewport:
        """Return to the previous viewport; the window viewport is never removed."""
        if len(self._viewports) > 1:
            self._viewports.pop()
        return self._viewports[-1]

    def viewport(self) -> Viewport:
        """Return the current viewport."""
        return self._viewports[-1]

    def _screen(self) -> tuple[float, float]:
        current = self._viewports[-1]
        return float(current.width), float(current.height)

    def model_transform(
        self,
        position: VecLike,
        angle: float = 0.0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
    ) -> Matrix:
        """Column-major matrix placing a unit shape at ``position`` in pixels."""
        width, height = self._screen()
        _check_size(width, height)
        p = _as_vec(position)
        s, c = (math.sin(angle), math.cos(angle)) if angle else (0.0, 1.0)
        return (
            c * scale_x / width * 2, s * scale_x / width * 2, 0.0, 0.0,
            s * scale_y / height * 2, -c * scale_y / height * 2, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            p.x / width * 2 - 1.0, -p.y / height * 2 + 1.0, p.z, 1.0,
        )

    def _shape(
        self,
        kind: str,
        matrix: Matrix,
        paint: Paint,
        vertex_count: int,
        fill_allowed: bool = True,
    ) -> list[DrawCommand]:
        emitted: list[DrawCommand] = []
        if fill_allowed and paint.fill is not None:
            emitted.append(
                DrawCommand(kind, TRIANGLE_FAN, vertex_count, matrix, paint.fill)
            )
        if paint.line is not None:
            emitted.append(
                DrawCommand(
                    kind, LINE_LOOP, vertex_count, matrix, paint.line, paint.line_width
                )
            )
        self.commands.extend(emitted)
        return emitted

    def draw_rect(
        self, x: float, y: float, width: float, height: float, paint: Paint
    ) -> list[DrawCommand]:
        """Draw a rectangle with its top-left corner at (x, y)."""
        matrix = self.model_transform(Vec(x, y), 0.0, width, height)
        return self._shape("rect", matrix, paint, 4)

    def draw_ellipse(
        self, x: float, y: float, width: float, height: float, paint: Paint
    ) -> list[DrawCommand]:
        """Draw the ellipse inscribed in the given rectangle."""
        matrix = self.model_transform(Vec(x, y), 0.0, width, height)
        return self._shape("ellipse", matrix, paint, DEFAULT_ELLIPSE_POINTS)

    def draw_triangle(
        self, v1: VecLike, v2: VecLike, v3: VecLike, paint: Paint
    ) -> list[DrawCommand]:
        """Draw a triangle through three points."""
        matrix = triangle_matrix(v1, v2, v3, *self._screen())
        return self._shape("triangle", matrix, paint, 3)

    def draw_line(self, v1: VecLike, v2: VecLike, paint: Paint) -> list[DrawCommand]:
        """Draw a line between two points; only the line colour of ``paint`` is used."""
        matrix = line_matrix(v1, v2, *self._screen())
        return self._shape("line", matrix, paint, 2, fill_allowed=False)

    def draw_texture_rect(
        self,
        position: VecLike,
        angle: float,
        width: float,
        height: float,
        texture: object,
        style: DrawStyle = DrawStyle.ORIGO_TOP_LEFT,
    ) -> DrawCommand:
        """Draw a texture quad, rotated by ``angle`` radians around its origin."""
        matrix = self.model_transform(position, angle, width, height)
        array = 1 if style & DrawStyle.CENTER_ORIGO else 0
        command = DrawCommand(
            "texture",
            TRIANGLE_FAN,
            4,
            matrix,
            texture=texture,
            vertex_array=array,
        )
        self.commands.append(command)
        return command

    def clear(
        self,
        r: float = 0.0,
        g: float = 0.0,
        b: float = 0.0,
        a: float = 0.0,
        depth: bool = False,
    ) -> DrawCommand:
        """Clear the frame to a colour, and the depth buffer if ``depth``."""
        self.clear_color = (r, g, b, a)
        command = DrawCommand("clear", color=Color(r, g, b, a), depth=bool(depth))
        self.commands.append(command)
        return command

    def set_depth_enabled(self, enabled: bool) -> None:
        """Turn depth testing on or off."""
        self.depth_enabled = bool(enabled)