"""Vertex data shared by the flat-colour and texture shader programs."""

from __future__ import annotations

import math
from dataclasses import dataclass

POSITION_ATTRIBUTE = "vPosition"
TEXCOORD_ATTRIBUTE = "vtex"
COLOR_UNIFORM = "uColor"
MATRIX_UNIFORM = "mvp_matrix"
TEXTURE_UNIFORM = "texture1"

DEFAULT_ELLIPSE_POINTS = 20

_SQUARE = (1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
_CENTERED_SQUARE = (0.5, -0.5, -0.5, -0.5, -0.5, 0.5, 0.5, 0.5)


def square_vertices(centered: bool = False) -> tuple[float, ...]:
    """Return the flat x, y list of the unit square used for rectangles.

    The plain square spans 0..1, the centred one -0.5..0.5.
    """
    return _CENTERED_SQUARE if centered else _SQUARE


def ellipse_vertices(count: int = DEFAULT_ELLIPSE_POINTS) -> list[float]:
    """Return ``count`` points on the circle inscribed in the unit square.

    The result is a flat x, y list, starting at the bottom-middle point and
    going round in equal angular steps.
    """
    if count < 1:
        raise ValueError("an ellipse needs at least one point")
    vertices: list[float] = []
    for i in range(count):
        angle = i / count * 2 * math.pi
        vertices.append(0.5 + math.sin(angle) / 2)
        vertices.append(0.5 + math.cos(angle) / 2)
    return vertices


@dataclass(frozen=True)
class VertexLayout:
    """Positions and texture coordinates for one textured quad layout."""

    centered: bool
    positions: tuple[float, ...]
    texcoords: tuple[float, ...]

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the quad."""
        return len(self.positions) // 2

    def vertices(self) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        """Return (position, texture coordinate) pairs for every vertex."""
        pos = self.positions
        tex = self.texcoords
        return [
            ((pos[i], pos[i + 1]), (tex[i], tex[i + 1]))
            for i in range(0, len(pos), 2)
        ]


def vertex_layout(centered: bool = False) -> VertexLayout:
    """Return the quad layout for textures drawn from the top-left or centre.

    Texture coordinates always come from the plain 0..1 square.
    """
    return VertexLayout(
        centered=centered,
        positions=square_vertices(centered),
        texcoords=square_vertices(False),
    )