"""Color representations, predefined colors, palettes and shape styles."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar

__all__ = [
    "Color",
    "RGBAColor",
    "RGBColor",
    "HSLColor",
    "PaletteColor",
    "Palette",
    "Palette99",
    "Palette9999",
    "Palette100",
    "ShapeStyle",
    "to_shape_style",
    "WHITE",
    "BLACK",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
    "TRANSPARENT",
]


def _to_u8(value: float) -> int:
    """Round half away from zero and saturate into the 0..255 range."""
    if math.isnan(value):
        return 0
    rounded = math.floor(abs(value) + 0.5)
    rounded = rounded if value >= 0 else -rounded
    return max(0, min(255, rounded))


def _check_channel(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"color channel {name} must be an integer in 0..255, got {value!r}")


class Color(ABC):
    """Any color representation."""

    @abstractmethod
    def rgb(self) -> tuple[int, int, int]:
        """Return the color as an (r, g, b) tuple of 8-bit channels."""

    @abstractmethod
    def alpha(self) -> float:
        """Return the alpha channel of the color."""

    def mix(self, value: float) -> RGBAColor:
        """Return this color with its opacity scaled by ``value``."""
        r, g, b = self.rgb()
        return RGBAColor(r, g, b, self.alpha() * value)

    def to_rgba(self) -> RGBAColor:
        """Convert the color into the internal RGBA representation."""
        r, g, b = self.rgb()
        return RGBAColor(r, g, b, self.alpha())

    def filled(self) -> ShapeStyle:
        """Make a filled shape style from the color."""
        return ShapeStyle.from_color(self).as_filled()

    def stroke_width(self, width: int) -> ShapeStyle:
        """Make a shape style with the given stroke width from the color."""
        return ShapeStyle.from_color(self).with_stroke_width(width)


@dataclass(frozen=True)
class RGBAColor(Color):
    """A color with red, green, blue channels and an alpha value."""

    r: int
    g: int
    b: int
    a: float

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_channel(name, getattr(self, name))

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def alpha(self) -> float:
        return self.a


@dataclass(frozen=True)
class RGBColor(Color):
    """An opaque color described by its RGB value."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_channel(name, getattr(self, name))

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def alpha(self) -> float:
        return 1.0


@dataclass(frozen=True)
class HSLColor(Color):
    """An opaque color in HSL space; each component is a fraction in 0..1."""

    h: float
    s: float
    l: float  # noqa: E741

    def rgb(self) -> tuple[int, int, int]:
        h, s, l = (min(max(v, 0.0), 1.0) for v in (self.h, self.s, self.l))  # noqa: E741

        if s == 0.0:
            value = _to_u8(l * 255.0)
            return (value, value, value)

        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q

        def convert(t: float) -> int:
            if t < 0.0:
                t += 1.0
            if t > 1.0:
                t -= 1.0
            if t < 1.0 / 6.0:
                value = p + (q - p) * 6.0 * t
            elif t < 1.0 / 2.0:
                value = q
            elif t < 2.0 / 3.0:
                value = p + (q - p) * (2.0 / 3.0 - t) * 6.0
            else:
                value = p
            return _to_u8(value * 255.0)

        return (convert(h + 1.0 / 3.0), convert(h), convert(h - 1.0 / 3.0))

    def alpha(self) -> float:
        return 1.0


class Palette:
    """A fixed list of colors that can be picked from by index."""

    COLORS: ClassVar[tuple[tuple[int, int, int], ...]] = ()

    @classmethod
    def pick(cls, idx: int) -> PaletteColor:
        """Pick a color, wrapping the index around the palette size."""
        if not cls.COLORS:
            raise ValueError(f"palette {cls.__name__} has no colors")
        return PaletteColor(cls, idx % len(cls.COLORS))


@dataclass(frozen=True)
class PaletteColor(Color):
    """A color taken from a palette."""

    palette: type[Palette]
    index: int

    def rgb(self) -> tuple[int, int, int]:
        return self.palette.COLORS[self.index]

    def alpha(self) -> float:
        return 1.0


class Palette99(Palette):
    """The palette of 99% accessibility."""

    COLORS = (
        (34, 195, 46),
        (255, 255, 0),
        (0, 128, 128),
        (255, 0, 0),
        (70, 240, 240),
        (230, 25, 75),
        (60, 180, 75),
        (245, 130, 48),
        (240, 50, 230),
        (210, 245, 60),
        (250, 190, 190),
        (0, 128, 128),
        (230, 190, 255),
        (170, 110, 40),
        (255, 250, 200),
        (128, 0, 0),
        (170, 255, 195),
        (128, 128, 0),
        (255, 215, 180),
        (0, 0, 128),
        (128, 128, 128),
        (0, 0, 0),
    )


class Palette9999(Palette):
    """The palette of 99.99% accessibility."""

    COLORS = (
        (255, 225, 25),
        (0, 130, 200),
        (245, 130, 48),
        (250, 190, 190),
        (230, 190, 255),
        (128, 0, 0),
        (0, 0, 128),
        (128, 128, 128),
        (0, 0, 0),
    )


class Palette100(Palette):
    """The palette of 100% accessibility."""

    COLORS = ((255, 225, 25), (0, 130, 200), (128, 128, 128), (0, 0, 0))


@dataclass(frozen=True)
class ShapeStyle:
    """Style for any shape: color, fill flag and stroke width."""

    color: RGBAColor
    filled: bool = False
    stroke_width: int = 1

    @classmethod
    def from_color(cls, color: Color) -> ShapeStyle:
        """Make an unfilled style of stroke width 1 from a color."""
        return cls(color=color.to_rgba(), filled=False, stroke_width=1)

    def as_filled(self) -> ShapeStyle:
        """Return a filled copy of this style."""
        return replace(self, filled=True)

    def with_stroke_width(self, width: int) -> ShapeStyle:
        """Return a copy of this style with a different stroke width."""
        return replace(self, stroke_width=width)


def to_shape_style(value: ShapeStyle | Color) -> ShapeStyle:
    """Accept a shape style or a color and return a shape style."""
    if isinstance(value, ShapeStyle):
        return value
    if isinstance(value, Color):
        return ShapeStyle.from_color(value)
    raise TypeError(f"cannot make a shape style from {type(value).__name__}")


WHITE = RGBColor(255, 255, 255)
BLACK = RGBColor(0, 0, 0)
RED = RGBColor(255, 0, 0)
GREEN = RGBColor(0, 255, 0)
BLUE = RGBColor(0, 0, 255)
YELLOW = RGBColor(255, 255, 0)
CYAN = RGBColor(0, 255, 255)
MAGENTA = RGBColor(255, 0, 255)
TRANSPARENT = RGBAColor(0, 0, 0, 0.0)