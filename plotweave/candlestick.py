"""The candlestick element showing open, high, low and close values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any

from .color import Color, ShapeStyle, to_shape_style
from .element import BackendCoord, Element

__all__ = ["CandleStick"]


class CandleStick(Element):
    """A candlestick data point; the gain style is used when open < close."""

    def __init__(
        self,
        x: Any,
        open: Any,  # noqa: A002
        high: Any,
        low: Any,
        close: Any,
        gain_style: ShapeStyle | Color,
        loss_style: ShapeStyle | Color,
        width: int,
    ) -> None:
        gaining = open < close
        self.style = to_shape_style(gain_style if gaining else loss_style)
        self.width = width
        self.points = ((x, open), (x, high), (x, low), (x, close))

    def point_iter(self) -> Iterator[Any]:
        return iter(self.points)

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        pts = list(islice(points, 4))
        if len(pts) != 4:
            return
        if pts[0][1] > pts[3][1]:
            pts[0], pts[3] = pts[3], pts[0]
        left = self.width // 2
        right = self.width - left
        color = self.style.color
        backend.draw_line(pts[0], pts[1], color)
        backend.draw_line(pts[2], pts[3], color)
        upper_left = (pts[0][0] - left, pts[0][1])
        bottom_right = (pts[3][0] + right, pts[3][1])
        backend.draw_rect(upper_left, bottom_right, color, False)