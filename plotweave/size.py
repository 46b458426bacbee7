"""Absolute and relative size descriptions resolved against a parent dimension."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Union

__all__ = [
    "RelativeSizeKind",
    "RelativeSize",
    "RelativeSizeWithBound",
    "dimension_of",
    "size_in_pixels",
    "percent_width",
    "percent_height",
    "percent",
]


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return rounded if value >= 0 else -rounded


def dimension_of(parent: Any) -> tuple[int, int]:
    """Return the (width, height) in pixels of a parent object or tuple."""
    if isinstance(parent, tuple):
        if len(parent) != 2:
            raise ValueError("a dimension tuple must hold exactly two values")
        return (int(parent[0]), int(parent[1]))
    for attr in ("dim", "dim_in_pixel", "get_size"):
        method = getattr(parent, attr, None)
        if callable(method):
            w, h = method()
            return (int(w), int(h))
    raise TypeError(f"{type(parent).__name__} has no dimension")


class RelativeSizeKind(Enum):
    """Which parent dimension a relative size refers to."""

    HEIGHT = "height"
    WIDTH = "width"
    SMALLER = "smaller"


@dataclass(frozen=True)
class RelativeSize:
    """A size given as a fraction of the parent's height, width or smaller side."""

    kind: RelativeSizeKind
    ratio: float

    def in_pixels(self, parent: Any) -> int:
        w, h = dimension_of(parent)
        base = {
            RelativeSizeKind.WIDTH: w,
            RelativeSizeKind.HEIGHT: h,
            RelativeSizeKind.SMALLER: min(w, h),
        }[self.kind]
        return _round_half_away(self.ratio * base)

    def min(self, min_size: int) -> RelativeSizeWithBound:
        """Bound the size from below."""
        return RelativeSizeWithBound(self, min_size=min_size)

    def max(self, max_size: int) -> RelativeSizeWithBound:
        """Bound the size from above."""
        return RelativeSizeWithBound(self, max_size=max_size)


@dataclass(frozen=True)
class RelativeSizeWithBound:
    """A relative size with optional lower and upper bounds in pixels."""

    size: RelativeSize
    min_size: int | None = None
    max_size: int | None = None

    def in_pixels(self, parent: Any) -> int:
        size = self.size.in_pixels(parent)
        lower_capped = size if self.min_size is None else max(self.min_size, size)
        # The upper bound is applied to the unbounded size, not the lower-capped one.
        return lower_capped if self.max_size is None else min(self.max_size, size)

    def min(self, min_size: int) -> RelativeSizeWithBound:
        """Set the lower bound."""
        return replace(self, min_size=min_size)

    def max(self, max_size: int) -> RelativeSizeWithBound:
        """Set the upper bound."""
        return replace(self, max_size=max_size)


SizeDesc = Union[int, RelativeSize, RelativeSizeWithBound]


def size_in_pixels(size: SizeDesc, parent: Any) -> int:
    """Resolve an absolute or relative size into pixels."""
    if isinstance(size, (RelativeSize, RelativeSizeWithBound)):
        return size.in_pixels(parent)
    if isinstance(size, int) and not isinstance(size, bool):
        return size
    raise TypeError(f"{type(size).__name__} is not a size description")


def percent_width(value: float) -> RelativeSize:
    """A size that is ``value`` percent of the parent width."""
    return RelativeSize(RelativeSizeKind.WIDTH, value / 100.0)


def percent_height(value: float) -> RelativeSize:
    """A size that is ``value`` percent of the parent height."""
    return RelativeSize(RelativeSizeKind.HEIGHT, value / 100.0)


def percent(value: float) -> RelativeSize:
    """A size that is ``value`` percent of the parent's smaller side."""
    return RelativeSize(RelativeSizeKind.SMALLER, value / 100.0)