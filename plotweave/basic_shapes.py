"""Basic shape elements: pixel, path, rectangle, circle and polygon."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from .color import Color, ShapeStyle, to_shape_style
from .element import BackendCoord, Element
from .size import SizeDesc, size_in_pixels

__all__ = ["Pixel", "PathElement", "Rectangle", "Circle", "Polygon"]


class Pixel(Element):
    """An element of a single pixel."""

    def __init__(self, pos: Any, style: ShapeStyle | Color) -> None:
        self.pos = pos
        self.style = to_shape_style(style)

    def point_iter(self) -> Iterator[Any]:
        yield self.pos

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        point = next(iter(points), None)
        if point is not None:
            backend.draw_pixel(point, self.style.color)


class PathElement(Element):
    """A series of connected lines."""

    def __init__(self, points: Iterable[Any], style: ShapeStyle | Color) -> None:
        self.points = list(points)
        self.style = to_shape_style(style)

    def point_iter(self) -> Iterator[Any]:
        return iter(self.points)

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        backend.draw_path(list(points), self.style)


class Rectangle(Element):
    """A rectangle given by two opposite corners."""

    def __init__(self, points: Sequence[Any], style: ShapeStyle | Color) -> None:
        corners = tuple(points)
        if len(corners) != 2:
            raise ValueError("a rectangle is given by exactly two corners")
        self.points = corners
        self.style = to_shape_style(style)
        self.margin = (0, 0, 0, 0)

    def set_margin(self, t: int, b: int, l: int, r: int) -> Rectangle:  # noqa: E741
        """Set the top, bottom, left and right margins in pixels."""
        self.margin = (t, b, l, r)
        return self

    def point_iter(self) -> Iterator[Any]:
        return iter(self.points)

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        it = iter(points)
        a = next(it, None)
        b = next(it, None)
        if a is None or b is None:
            return
        top, bottom, left, right = self.margin
        upper_left = (min(a[0], b[0]) + left, min(a[1], b[1]) + top)
        bottom_right = (max(a[0], b[0]) - right, max(a[1], b[1]) - bottom)
        backend.draw_rect(upper_left, bottom_right, self.style, self.style.filled)


class Circle(Element):
    """A circle with an absolute or relative radius."""

    def __init__(self, coord: Any, size: SizeDesc, style: ShapeStyle | Color) -> None:
        self.center = coord
        self.size = size
        self.style = to_shape_style(style)

    def point_iter(self) -> Iterator[Any]:
        yield self.center

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        point = next(iter(points), None)
        if point is not None:
            radius = max(size_in_pixels(self.size, parent_dim), 0)
            backend.draw_circle(point, radius, self.style, self.style.filled)


class Polygon(Element):
    """A filled polygon."""

    def __init__(self, points: Iterable[Any], style: ShapeStyle | Color) -> None:
        self.points = list(points)
        self.style = to_shape_style(style)

    def point_iter(self) -> Iterator[Any]:
        return iter(self.points)

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        backend.fill_polygon(list(points), self.style.color)