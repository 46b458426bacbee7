"""Text styles: font, color and anchor position."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .color import BLACK, Color, RGBAColor
from .font import FontDesc, FontFamily, FontTransform, _to_family, _to_style, into_font
from .size import RelativeSize, RelativeSizeWithBound, size_in_pixels

__all__ = ["HPos", "VPos", "Pos", "TextStyle", "into_text_style"]


class HPos(Enum):
    """Horizontal position of the anchor point relative to the text."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class VPos(Enum):
    """Vertical position of the anchor point relative to the text."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Pos:
    """The text anchor position."""

    h_pos: HPos = HPos.LEFT
    v_pos: VPos = VPos.TOP

    @classmethod
    def default(cls) -> Pos:
        """The top-left anchor."""
        return cls(HPos.LEFT, VPos.TOP)


@dataclass(frozen=True)
class TextStyle:
    """The style of a piece of text."""

    font: FontDesc
    color: RGBAColor = field(default_factory=BLACK.to_rgba)
    pos: Pos = field(default_factory=Pos.default)

    @classmethod
    def from_font(cls, font: Any) -> TextStyle:
        """Make a black, top-left anchored style from anything that makes a font."""
        return cls(font=into_font(font))

    def with_color(self, color: Color) -> TextStyle:
        """Return a copy in a different color."""
        return replace(self, color=color.to_rgba())

    def with_transform(self, trans: FontTransform) -> TextStyle:
        """Return a copy whose font has a different transform."""
        return replace(self, font=self.font.with_transform(trans))

    def with_pos(self, pos: Pos) -> TextStyle:
        """Return a copy with a different anchor position."""
        return replace(self, pos=pos)


def _resolve_size(size: Any, parent: Any) -> float:
    if isinstance(size, float):
        return size
    if isinstance(size, (int, RelativeSize, RelativeSizeWithBound)):
        return float(size_in_pixels(size, parent))
    raise TypeError(f"{type(size).__name__} is not a size description")


def into_text_style(value: Any, parent: Any = None) -> TextStyle:
    """Make a text style, resolving relative font sizes against ``parent``.

    Accepts a text style, a font, a family or name, or a tuple of a family
    and a size with an optional style.
    """
    if isinstance(value, TextStyle):
        return value
    if isinstance(value, (FontDesc, FontFamily, str)):
        return TextStyle.from_font(value)
    if isinstance(value, tuple):
        if len(value) == 2:
            family, size = value
            font = FontDesc(_to_family(family), _resolve_size(size, parent))
        elif len(value) == 3:
            family, size, style = value
            font = FontDesc(_to_family(family), _resolve_size(size, parent), _to_style(style))
        else:
            raise ValueError("a text style tuple holds a family, a size and optionally a style")
        return TextStyle(font=font)
    raise TypeError(f"cannot make a text style from {type(value).__name__}")