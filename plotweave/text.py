"""Single-line and multi-line text elements."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import Any

from .element import BackendCoord, Element
from .font import FontDesc, LayoutBox
from .text_style import TextStyle, into_text_style

__all__ = ["Text", "MultiLineText", "layout_multiline_text"]


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return rounded if value >= 0 else -rounded


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def layout_multiline_text(text: str, max_width: int, font: FontDesc) -> Iterator[str]:
    """Split text into lines, wrapping lines wider than ``max_width`` pixels.

    A ``max_width`` of 0 disables wrapping.  Each wrapped piece holds at
    least one character.
    """
    for line in _split_lines(text):
        if max_width == 0 or not line:
            yield line
            continue
        remaining = line
        while remaining:
            left = 0
            while left < len(remaining):
                if font.box_size(remaining[: left + 1])[0] > max_width:
                    break
                left += 1
            left = max(left, 1)
            yield remaining[:left]
            remaining = remaining[left:]


class Text(Element):
    """A single line of text anchored at a point."""

    def __init__(self, text: str, coord: Any, style: Any) -> None:
        self.text = text
        self.coord = coord
        self.style = into_text_style(style)

    def point_iter(self) -> Iterator[Any]:
        yield self.coord

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        point = next(iter(points), None)
        if point is not None:
            backend.draw_text(self.text, self.style, point)


class MultiLineText(Element):
    """Several lines of left-aligned text anchored at an upper-left point."""

    def __init__(self, pos: Any, style: Any) -> None:
        self.lines: list[str] = []
        self.coord = pos
        self.style: TextStyle = into_text_style(style)
        self.line_height = 1.25

    @classmethod
    def from_str(cls, text: str, pos: Any, style: Any, max_width: int = 0) -> MultiLineText:
        """Build a multi-line element, wrapping at ``max_width`` pixels (0: no wrap)."""
        element = cls(pos, style)
        for line in layout_multiline_text(text, max_width, element.style.font):
            element.push_line(line)
        return element

    def set_line_height(self, value: float) -> MultiLineText:
        """Set the line height as a multiple of the font size."""
        self.line_height = value
        return self

    def push_line(self, line: str) -> None:
        """Append a line."""
        self.lines.append(line)

    def relocate(self, coord: Any) -> None:
        """Move the element to another anchor."""
        self.coord = coord

    def _layout_lines(self, origin: BackendCoord) -> Iterator[BackendCoord]:
        x0, y0 = origin
        step = self.style.font.size * self.line_height
        for idx in range(len(self.lines)):
            yield (_round_half_away(float(x0)), _round_half_away(y0 + idx * step))

    def estimate_dimension(self) -> tuple[int, int]:
        """Estimate the width and height of the whole block."""
        mx, my = 0, 0
        for (x, y), line in zip(self._layout_lines((0, 0)), self.lines):
            dx, dy = self.style.font.box_size(line)
            mx = max(mx, x + dx)
            my = max(my, y + dy)
        return (mx, my)

    def compute_line_layout(self) -> list[LayoutBox]:
        """The pixel box of each line; the anchor must be a pixel coordinate."""
        boxes = []
        for (x, y), line in zip(self._layout_lines(self.coord), self.lines):
            dx, dy = self.style.font.box_size(line)
            boxes.append(((x, y), (x + dx, y + dy)))
        return boxes

    def point_iter(self) -> Iterator[Any]:
        yield self.coord

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        origin = next(iter(points), None)
        if origin is None:
            return
        for point, line in zip(self._layout_lines(origin), self.lines):
            backend.draw_text(line, self.style, point)