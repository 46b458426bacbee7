"""Predefined series: iterables that turn data points into drawable elements.

Any iterable of elements is a series.  These classes transform data into
elements for common plot types.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .basic_shapes import Circle, PathElement, Pixel, Polygon
from .color import TRANSPARENT, Color, ShapeStyle, to_shape_style
from .element import DynElement, Element, into_dyn
from .size import SizeDesc

__all__ = ["AreaSeries", "LineSeries", "PointSeries"]

PointMaker = Callable[[Any, SizeDesc, ShapeStyle], Element]


class AreaSeries:
    """A filled area between a line and a baseline, with an optional border.

    Iterating yields the filled polygon first, then the border path.
    """

    def __init__(
        self, data: Iterable[tuple[Any, Any]], baseline: Any, area_style: ShapeStyle | Color
    ) -> None:
        self._data = list(data)
        self._baseline = baseline
        self._area_style = to_shape_style(area_style)
        self._border_style = ShapeStyle.from_color(TRANSPARENT)

    def border_style(self, style: ShapeStyle | Color) -> AreaSeries:
        """Set the style of the border line."""
        self._border_style = to_shape_style(style)
        return self

    def __iter__(self) -> Iterator[DynElement]:
        data = list(self._data)
        polygon = list(data)
        if data:
            polygon.append((data[-1][0], self._baseline))
            polygon.append((data[0][0], self._baseline))
        yield into_dyn(Polygon(polygon, self._area_style))
        yield into_dyn(PathElement(data, self._border_style))


class LineSeries:
    """A line through the data points, optionally marking each with a circle.

    Iterating yields one circle per point when the point size is positive,
    then the path.  Empty data yields nothing.
    """

    def __init__(self, data: Iterable[Any], style: ShapeStyle | Color) -> None:
        self._data = list(data)
        self._style = to_shape_style(style)
        self._point_size = 0

    def point_size(self, size: int) -> LineSeries:
        """Set the radius of the circle drawn at each point (0: none)."""
        self._point_size = size
        return self

    def __iter__(self) -> Iterator[DynElement]:
        if not self._data:
            return
        if self._point_size > 0:
            for point in self._data:
                yield into_dyn(Circle(point, self._point_size, self._style))
        yield into_dyn(PathElement(list(self._data), self._style))


def _point_maker(marker: Any) -> PointMaker:
    if marker is Pixel:
        return lambda pos, _size, style: Pixel(pos, style)
    make_point = getattr(marker, "make_point", None)
    if callable(make_point):
        return make_point
    if callable(marker):
        return marker
    raise TypeError(f"{marker!r} cannot build point elements")


class PointSeries:
    """One element per data point, built by a marker class or a function."""

    def __init__(
        self,
        data: Iterable[Any],
        size: SizeDesc,
        style: ShapeStyle | Color,
        marker: Any = Circle,
    ) -> None:
        self._data = data
        self._size = size
        self._style = to_shape_style(style)
        self._make_point = _point_maker(marker)

    @classmethod
    def of_element(
        cls,
        data: Iterable[Any],
        size: SizeDesc,
        style: ShapeStyle | Color,
        cons: PointMaker,
    ) -> PointSeries:
        """Build each element with ``cons(point, size, style)``."""
        if not callable(cons):
            raise TypeError("the element constructor must be callable")
        series = cls(data, size, style)
        series._make_point = cons
        return series

    def __iter__(self) -> Iterator[Any]:
        for point in self._data:
            yield self._make_point(point, self._size, self._style)