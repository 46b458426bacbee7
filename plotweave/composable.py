"""Composable elements built from an anchor point and pixel-offset parts.

``EmptyElement.at(coord) + a + b + ...`` builds a group whose parts are given
in pixel offsets relative to the anchor's position on the backend.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .element import BackendCoord, Element

__all__ = ["EmptyElement", "BoxedElement", "ComposedElement"]


def _draw_shifted(
    element: Element,
    origin: BackendCoord,
    backend: Any,
    parent_dim: tuple[int, int],
) -> None:
    x0, y0 = origin
    shifted = ((p[0] + x0, p[1] + y0) for p in element.point_iter())
    element.draw(shifted, backend, parent_dim)


class EmptyElement(Element):
    """An element that draws nothing and marks the origin of a group."""

    def __init__(self, coord: Any) -> None:
        self.coord = coord

    @classmethod
    def at(cls, coord: Any) -> EmptyElement:
        """Start a composed element anchored at ``coord``."""
        return cls(coord)

    def __add__(self, other: Any) -> BoxedElement:
        if not isinstance(other, Element):
            return NotImplemented
        return BoxedElement(self.coord, other)

    def point_iter(self) -> Iterator[Any]:
        yield self.coord

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        return None


class BoxedElement(Element):
    """A composed element with a single part."""

    def __init__(self, offset: Any, inner: Element) -> None:
        self.offset = offset
        self.inner = inner

    def __add__(self, other: Any) -> ComposedElement:
        if not isinstance(other, Element):
            return NotImplemented
        return ComposedElement(self.offset, self.inner, other)

    def point_iter(self) -> Iterator[Any]:
        yield self.offset

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        origin = next(iter(points), None)
        if origin is not None:
            _draw_shifted(self.inner, origin, backend, parent_dim)


class ComposedElement(Element):
    """A composed element with at least two parts."""

    def __init__(self, offset: Any, first: Element, second: Element) -> None:
        self.offset = offset
        self.first = first
        self.second = second

    def __add__(self, other: Any) -> ComposedElement:
        if not isinstance(other, Element):
            return NotImplemented
        return ComposedElement(
            self.offset, self.first, ComposedElement((0, 0), self.second, other)
        )

    def point_iter(self) -> Iterator[Any]:
        yield self.offset

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        origin = next(iter(points), None)
        if origin is not None:
            _draw_shifted(self.first, origin, backend, parent_dim)
            _draw_shifted(self.second, origin, backend, parent_dim)