"""The boxplot element drawn from five quartile values."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from enum import Enum
from itertools import islice
from typing import Any

from .color import BLACK, Color, ShapeStyle, to_shape_style
from .element import BackendCoord, Element

__all__ = ["Orientation", "Boxplot"]

DEFAULT_WIDTH = 10


def _truncate(value: float) -> int:
    """Convert a float to int toward zero; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return 2**31 - 1 if value > 0 else -(2**31)
    return int(value)


class Orientation(Enum):
    """Whether the key lies on the X axis (vertical) or the Y axis (horizontal)."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    def make_coord(self, key: Any, value: Any) -> tuple[Any, Any]:
        """Build a guest coordinate from a key and a value."""
        if self is Orientation.VERTICAL:
            return (key, value)
        return (value, key)

    def with_offset(self, coord: BackendCoord, offset: float) -> BackendCoord:
        """Shift a pixel coordinate along the key axis, truncating the offset."""
        shift = _truncate(offset)
        x, y = coord
        if self is Orientation.VERTICAL:
            return (x + shift, y)
        return (x, y + shift)


def _quartile_values(quartiles: Any) -> tuple[float, ...]:
    values_method = getattr(quartiles, "values", None)
    values = values_method() if callable(values_method) else quartiles
    result = tuple(float(v) for v in values)
    if len(result) != 5:
        raise ValueError(f"a boxplot needs exactly five values, got {len(result)}")
    return result


def _default_style() -> ShapeStyle:
    return ShapeStyle.from_color(BLACK)


@dataclass(frozen=True)
class Boxplot(Element):
    """A box-and-whisker element; builder methods return modified copies."""

    key: Any
    values: tuple[float, ...]
    orientation: Orientation
    style: ShapeStyle = field(default_factory=_default_style)
    width: int = DEFAULT_WIDTH
    whisker_width: float = 1.0
    offset: float = 0.0

    @classmethod
    def new_vertical(cls, key: Any, quartiles: Any) -> Boxplot:
        """A vertical boxplot; ``quartiles`` has a ``values()`` method or holds five values."""
        return cls(key, _quartile_values(quartiles), Orientation.VERTICAL)

    @classmethod
    def new_horizontal(cls, key: Any, quartiles: Any) -> Boxplot:
        """A horizontal boxplot; ``quartiles`` has a ``values()`` method or holds five values."""
        return cls(key, _quartile_values(quartiles), Orientation.HORIZONTAL)

    def with_style(self, style: ShapeStyle | Color) -> Boxplot:
        """Return a copy with a different style."""
        return replace(self, style=to_shape_style(style))

    def with_width(self, width: int) -> Boxplot:
        """Return a copy with a different bar width in pixels."""
        return replace(self, width=width)

    def with_whisker_width(self, whisker_width: float) -> Boxplot:
        """Return a copy whose whiskers are this fraction of the bar width."""
        return replace(self, whisker_width=whisker_width)

    def with_offset(self, offset: float) -> Boxplot:
        """Return a copy shifted along the key axis by ``offset`` pixels."""
        return replace(self, offset=float(offset))

    def point_iter(self) -> Iterator[Any]:
        return iter([self.orientation.make_coord(self.key, v) for v in self.values])

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        pts = list(islice(points, 5))
        if len(pts) != 5:
            return
        orient = self.orientation
        width = float(self.width)
        half_bar = width / 2.0
        half_whisker = width * self.whisker_width / 2.0
        color = self.style.color

        def moved(coord: BackendCoord) -> BackendCoord:
            return orient.with_offset(coord, self.offset)

        def shifted(coord: BackendCoord, delta: float) -> BackendCoord:
            return orient.with_offset(moved(coord), delta)

        backend.draw_line(shifted(pts[0], -half_whisker), shifted(pts[0], half_whisker), color)
        backend.draw_line(moved(pts[0]), moved(pts[1]), color)

        corner1 = shifted(pts[3], -half_bar)
        corner2 = shifted(pts[1], half_bar)
        upper_left = (min(corner1[0], corner2[0]), min(corner1[1], corner2[1]))
        bottom_right = (max(corner1[0], corner2[0]), max(corner1[1], corner2[1]))
        backend.draw_rect(upper_left, bottom_right, color, True)

        backend.draw_line(shifted(pts[2], -half_bar), shifted(pts[2], half_bar), color)
        backend.draw_line(moved(pts[3]), moved(pts[4]), color)
        backend.draw_line(shifted(pts[4], -half_whisker), shifted(pts[4], half_whisker), color)