"""Font descriptions and a simple size-based text layout estimator."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from .color import Color

if TYPE_CHECKING:
    from .text_style import TextStyle

__all__ = [
    "FontError",
    "FontTransform",
    "FamilyKind",
    "FontFamily",
    "FontStyle",
    "FontDesc",
    "LayoutBox",
    "estimate_layout",
    "into_font",
]

LayoutBox = tuple[tuple[int, int], tuple[int, int]]


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return rounded if value >= 0 else -rounded


class FontError(Exception):
    """Raised when a font operation fails."""

    def __init__(self, message: str = "General Error") -> None:
        super().__init__(message)


class FontTransform(Enum):
    """A rotation applied to rendered text."""

    NONE = 0
    ROTATE90 = 90
    ROTATE180 = 180
    ROTATE270 = 270

    def transform(self, x: int, y: int) -> tuple[int, int]:
        """Rotate a pixel offset clockwise by this transform."""
        if self is FontTransform.ROTATE90:
            return (-y, x)
        if self is FontTransform.ROTATE180:
            return (-x, -y)
        if self is FontTransform.ROTATE270:
            return (y, -x)
        return (x, y)


class FamilyKind(Enum):
    """The generic class of a font family."""

    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    NAME = "name"


@dataclass(frozen=True)
class FontFamily:
    """A generic font family class or a specific family name."""

    kind: FamilyKind
    name: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is FamilyKind.NAME) != (self.name is not None):
            raise ValueError("a font family carries a name exactly when its kind is NAME")

    @classmethod
    def named(cls, name: str) -> FontFamily:
        """A specific font family with the given name."""
        return cls(FamilyKind.NAME, name)

    @classmethod
    def from_str(cls, text: str) -> FontFamily:
        """Parse a family name; generic names are matched case-insensitively."""
        generic = {
            "serif": FamilyKind.SERIF,
            "sans-serif": FamilyKind.SANS_SERIF,
            "monospace": FamilyKind.MONOSPACE,
        }.get(text.lower())
        if generic is not None:
            return cls(generic)
        return cls.named(text)

    def as_str(self) -> str:
        """A CSS compatible name for the family."""
        if self.kind is FamilyKind.NAME:
            assert self.name is not None
            return self.name
        if self.kind is FamilyKind.MONOSPACE:
            return "monospace"
        return "宋体"


class FontStyle(Enum):
    """The font variation, such as italic or bold."""

    NORMAL = "normal"
    OBLIQUE = "oblique"
    ITALIC = "italic"
    BOLD = "bold"

    @classmethod
    def from_str(cls, text: str) -> FontStyle:
        """Parse a style name; unknown names give the normal style."""
        try:
            return cls(text.lower())
        except ValueError:
            return cls.NORMAL

    def as_str(self) -> str:
        """A CSS compatible name for the style."""
        return self.value


def estimate_layout(size: float, text: str) -> LayoutBox:
    """Crudely estimate the layout box of ``text`` drawn at ``size``.

    The width is proportional to the UTF-8 encoded length of the text.
    """
    em = size / 1.24 / 1.24
    byte_len = len(text.encode("utf-8"))
    return (
        (0, -_round_half_away(em)),
        (_round_half_away(em * 0.7 * byte_len), _round_half_away(em * 0.24)),
    )


@dataclass(frozen=True)
class FontDesc:
    """A font: family, size, style and rotation."""

    family: FontFamily
    size: float
    style: FontStyle = FontStyle.NORMAL
    transform: FontTransform = FontTransform.NONE

    @property
    def name(self) -> str:
        """The name of the font family."""
        return self.family.as_str()

    def resize(self, size: float) -> FontDesc:
        """Return the same font at a different size."""
        return replace(self, size=float(size))

    def with_style(self, style: FontStyle | str) -> FontDesc:
        """Return the same font with a different style."""
        return replace(self, style=_to_style(style))

    def with_transform(self, trans: FontTransform) -> FontDesc:
        """Return the same font with a different transform."""
        return replace(self, transform=trans)

    def color(self, color: Color) -> TextStyle:
        """Make a text style of this font in the given color."""
        from .text_style import Pos, TextStyle

        return TextStyle(font=self, color=color.to_rgba(), pos=Pos.default())

    def layout_box(self, text: str) -> LayoutBox:
        """The layout box of the text, untransformed."""
        return estimate_layout(self.size, text)

    def box_size(self, text: str) -> tuple[int, int]:
        """The width and height of the text after applying the transform."""
        (min_x, min_y), (max_x, max_y) = self.layout_box(text)
        w, h = self.transform.transform(max_x - min_x, max_y - min_y)
        return (abs(w), abs(h))


def _to_family(value: FontFamily | str) -> FontFamily:
    if isinstance(value, FontFamily):
        return value
    if isinstance(value, str):
        return FontFamily.from_str(value)
    raise TypeError(f"cannot make a font family from {type(value).__name__}")


def _to_style(value: FontStyle | str) -> FontStyle:
    if isinstance(value, FontStyle):
        return value
    if isinstance(value, str):
        return FontStyle.from_str(value)
    raise TypeError(f"cannot make a font style from {type(value).__name__}")


def _to_size(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"font size must be a number, got {type(value).__name__}")
    return float(value)


FontLike = Union[FontDesc, FontFamily, str, tuple]


def into_font(value: FontLike) -> FontDesc:
    """Make a font description from a font, family, name or tuple.

    Tuples are ``(family, size)`` or ``(family, size, style)``; a bare
    family or name gives size 1.
    """
    if isinstance(value, FontDesc):
        return value
    if isinstance(value, (FontFamily, str)):
        return FontDesc(_to_family(value), 1.0)
    if isinstance(value, tuple):
        if len(value) == 2:
            family, size = value
            return FontDesc(_to_family(family), _to_size(size))
        if len(value) == 3:
            family, size, style = value
            return FontDesc(_to_family(family), _to_size(size), _to_style(style))
        raise ValueError("a font tuple holds a family, a size and optionally a style")
    raise TypeError(f"cannot make a font from {type(value).__name__}")