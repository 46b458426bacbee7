"""The element protocol and the dynamically dispatched element container.

An element is the high-level drawing unit.  It reports its key points in the
guest coordinate system through ``point_iter``.  Once those points have been
mapped to backend pixel coordinates, ``draw`` renders the element on a
backend.

A backend is any object with the drawing methods the elements call:
``draw_pixel(point, color)``, ``draw_line(start, end, color)``,
``draw_path(points, style)``, ``draw_rect(upper_left, bottom_right, style,
fill)``, ``draw_circle(center, radius, style, fill)``,
``fill_polygon(points, color)``, ``draw_text(text, style, pos)`` and
``blit_bitmap(pos, size, buffer)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["Element", "DynElement", "into_dyn"]

BackendCoord = tuple[int, int]


class Element(ABC):
    """A collection of key points that can be drawn on a backend."""

    @abstractmethod
    def point_iter(self) -> Iterable[Any]:
        """Return the key points of the element in guest coordinates."""

    @abstractmethod
    def draw(
        self,
        points: Iterable[BackendCoord],
        backend: Any,
        parent_dim: tuple[int, int],
    ) -> None:
        """Draw the element using its key points already mapped to pixels."""


class DynElement(Element):
    """A container that holds any element together with a copy of its points."""

    def __init__(self, points: Iterable[Any], drawable: Element) -> None:
        self._points = list(points)
        self._drawable = drawable

    @property
    def inner(self) -> Element:
        """The wrapped element."""
        return self._drawable

    def point_iter(self) -> Iterator[Any]:
        return iter(self._points)

    def draw(
        self,
        points: Iterable[BackendCoord],
        backend: Any,
        parent_dim: tuple[int, int],
    ) -> None:
        self._drawable.draw(iter(points), backend, parent_dim)

    def __repr__(self) -> str:
        return f"DynElement(points={self._points!r}, drawable={self._drawable!r})"


def into_dyn(element: Element) -> DynElement:
    """Wrap an element into a dynamically dispatched container."""
    if not isinstance(element, Element):
        raise TypeError(f"{type(element).__name__} is not an element")
    return DynElement(element.point_iter(), element)