"""An element that blits a bitmap onto the backend."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Union

from .element import BackendCoord, Element

__all__ = ["BitMapElement"]

RGB_PIXEL_SIZE = 3

Buffer = Union[bytes, bytearray, memoryview]


def _check_size(size: tuple[int, int]) -> tuple[int, int]:
    w, h = size
    if w < 0 or h < 0:
        raise ValueError(f"bitmap size must not be negative, got {size!r}")
    return (int(w), int(h))


class BitMapElement(Element):
    """A bitmap placed with its upper-left corner at a coordinate.

    Without a buffer, a zeroed buffer of the right size is created.  A given
    buffer is shared, not copied, and may be longer than needed.
    """

    def __init__(
        self,
        pos: Any,
        size: tuple[int, int],
        pixel_size: int = RGB_PIXEL_SIZE,
        buffer: Buffer | None = None,
    ) -> None:
        if pixel_size <= 0:
            raise ValueError("pixel size must be positive")
        self.size = _check_size(size)
        self.pixel_size = pixel_size
        required = self.size[0] * self.size[1] * pixel_size
        if buffer is None:
            buffer = bytearray(required)
        elif len(buffer) < required:
            raise ValueError(
                f"buffer holds {len(buffer)} bytes, a {self.size[0]}x{self.size[1]} "
                f"bitmap needs {required}"
            )
        self.pos = pos
        self._buffer = buffer

    @classmethod
    def with_buffer(
        cls,
        pos: Any,
        size: tuple[int, int],
        buffer: Buffer,
        pixel_size: int = RGB_PIXEL_SIZE,
    ) -> BitMapElement:
        """Use an existing buffer; raises ValueError if it is too short."""
        return cls(pos, size, pixel_size, buffer=buffer)

    @property
    def buffer(self) -> Buffer:
        """The pixel buffer."""
        return self._buffer

    def copy_to(self, pos: Any) -> BitMapElement:
        """Another element at ``pos`` sharing this element's pixels."""
        return type(self)(pos, self.size, self.pixel_size, buffer=self._buffer)

    def move_to(self, pos: Any) -> None:
        """Move this element to a new position."""
        self.pos = pos

    def point_iter(self) -> Iterator[Any]:
        yield self.pos

    def draw(
        self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]
    ) -> None:
        point = next(iter(points), None)
        if point is not None:
            backend.blit_bitmap(point, self.size, bytes(self._buffer))