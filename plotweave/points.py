"""Point marker elements: cross and triangle."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import Any

from .color import Color, ShapeStyle, to_shape_style
from .element import BackendCoord, Element
from .size import SizeDesc, size_in_pixels

__all__ = ["Cross", "TriangleMarker"]

_TRIANGLE_ANGLES = (-90, -210, -330)


class Cross(Element):
    """A cross marker centred on a point."""

    def __init__(self, coord: Any, size: SizeDesc, style: ShapeStyle | Color) -> None:
        self.center = coord
        self.size = size
        self.style = to_shape_style(style)

    @classmethod
    def make_point(cls, pos: Any, size: SizeDesc, style: ShapeStyle | Color) -> Cross:
        """Build the marker for a data point."""
        return cls(pos, size, style)

    def point_iter(self) -> Iterator[Any]:
        yield self.center

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        point = next(iter(points), None)
        if point is None:
            return
        x, y = point
        size = size_in_pixels(self.size, parent_dim)
        x0, y0 = x - size, y - size
        x1, y1 = x + size, y + size
        backend.draw_line((x0, y0), (x1, y1), self.style.color)
        backend.draw_line((x0, y1), (x1, y0), self.style.color)


class TriangleMarker(Element):
    """A filled upward-pointing triangle marker centred on a point."""

    def __init__(self, coord: Any, size: SizeDesc, style: ShapeStyle | Color) -> None:
        self.center = coord
        self.size = size
        self.style = to_shape_style(style)

    @classmethod
    def make_point(
        cls, pos: Any, size: SizeDesc, style: ShapeStyle | Color
    ) -> TriangleMarker:
        """Build the marker for a data point."""
        return cls(pos, size, style)

    def point_iter(self) -> Iterator[Any]:
        yield self.center

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        point = next(iter(points), None)
        if point is None:
            return
        x, y = point
        size = size_in_pixels(self.size, parent_dim)
        vertices = [
            (
                math.ceil(math.cos(rad) * size + x),
                math.ceil(math.sin(rad) * size + y),
            )
            for rad in (math.radians(deg) for deg in _TRIANGLE_ANGLES)
        ]
        backend.fill_polygon(vertices, self.style.color)