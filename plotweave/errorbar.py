"""The error bar element showing a minimum, average and maximum."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any

from .boxplot import Orientation
from .color import Color, ShapeStyle, to_shape_style
from .element import BackendCoord, Element

__all__ = ["ErrorBar"]


def _ending_coord(
    orientation: Orientation, coord: BackendCoord, width: int
) -> tuple[BackendCoord, BackendCoord]:
    x, y = coord
    half = width // 2
    if orientation is Orientation.VERTICAL:
        return ((x - half, y), (x + half, y))
    return ((x, y - half), (x, y + half))


@dataclass(frozen=True)
class ErrorBar(Element):
    """An error bar at a key with min, average and max values."""

    key: Any
    values: tuple[Any, Any, Any]
    orientation: Orientation
    style: ShapeStyle
    width: int

    @classmethod
    def new_vertical(
        cls,
        key: Any,
        min_value: Any,
        avg: Any,
        max_value: Any,
        style: ShapeStyle | Color,
        width: int,
    ) -> ErrorBar:
        """An error bar whose key lies on the X axis."""
        return cls(
            key, (min_value, avg, max_value), Orientation.VERTICAL, to_shape_style(style), width
        )

    @classmethod
    def new_horizontal(
        cls,
        key: Any,
        min_value: Any,
        avg: Any,
        max_value: Any,
        style: ShapeStyle | Color,
        width: int,
    ) -> ErrorBar:
        """An error bar whose key lies on the Y axis."""
        return cls(
            key, (min_value, avg, max_value), Orientation.HORIZONTAL, to_shape_style(style), width
        )

    def point_iter(self) -> Iterator[Any]:
        return iter([self.orientation.make_coord(self.key, v) for v in self.values])

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        pts = list(islice(points, 3))
        if len(pts) < 3:
            raise ValueError(f"an error bar needs three points, got {len(pts)}")
        color = self.style.color
        start, end = _ending_coord(self.orientation, pts[0], self.width)
        backend.draw_line(start, end, color)
        start, end = _ending_coord(self.orientation, pts[2], self.width)
        backend.draw_line(start, end, color)
        backend.draw_line(pts[0], pts[2], color)
        backend.draw_circle(pts[1], self.width // 2, color, self.style.filled)