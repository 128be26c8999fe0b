"""Parsing of guifont settings and the keys used to select fonts."""

from __future__ import annotations

import enum
import math
import re
import sys
from dataclasses import dataclass, field

from gridfront.animation import F32_EPSILON

DEFAULT_FONT_SIZE = 14.0

_FLOAT_TEXT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def points_to_pixels(value: float) -> float:
    """Convert a font size in points to pixels at the standard 96/72 ratio.

    On macOS points and pixels are the same, so the value is returned as is.
    """
    if sys.platform == "darwin":
        return value
    pixels_per_inch = 96.0
    points_per_inch = 72.0
    return value * (pixels_per_inch / points_per_inch)


class SelectionKind(enum.Enum):
    NAME = "name"
    CHARACTER = "character"
    DEFAULT = "default"
    LAST_RESORT = "last_resort"


@dataclass(frozen=True)
class FontSelection:
    """Which font to load: a family name, a font covering a character, or a bundled font."""

    kind: SelectionKind
    value: str | None = None

    @classmethod
    def named(cls, name: str) -> FontSelection:
        return cls(SelectionKind.NAME, name)

    @classmethod
    def character(cls, ch: str) -> FontSelection:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return cls(SelectionKind.CHARACTER, ch)

    @classmethod
    def default(cls) -> FontSelection:
        return cls(SelectionKind.DEFAULT)

    @classmethod
    def last_resort(cls) -> FontSelection:
        return cls(SelectionKind.LAST_RESORT)


@dataclass(frozen=True)
class FontKey:
    """Hashable description of a font to load."""

    bold: bool = False
    italic: bool = False
    font_selection: FontSelection = field(default_factory=FontSelection.default)

    @classmethod
    def from_options(cls, options: FontOptions) -> FontKey:
        return cls(
            bold=options.bold,
            italic=options.italic,
            font_selection=options.primary_font(),
        )


def _parse_size(text: str) -> float | None:
    if not _FLOAT_TEXT.fullmatch(text):
        return None
    return float(text)


@dataclass(eq=False)
class FontOptions:
    """Font families, pixel size and style parsed from a guifont setting."""

    font_list: list[str] = field(default_factory=list)
    size: float = field(default_factory=lambda: points_to_pixels(DEFAULT_FONT_SIZE))
    bold: bool = False
    italic: bool = False

    @classmethod
    def parse(cls, guifont_setting: str) -> FontOptions:
        """Parse "<font>[,<fallback>...][:h<size>][:b][:i]"; unknown parts are ignored."""
        font_list: list[str] = []
        size = DEFAULT_FONT_SIZE
        bold = False
        italic = False

        parts = [part for part in guifont_setting.split(":") if part]

        if parts:
            parsed_font_list = [name for name in parts[0].split(",") if name]
            if parsed_font_list:
                font_list = parsed_font_list

        for part in parts[1:]:
            if part.startswith("h") and len(part) > 1:
                parsed_size = _parse_size(part[1:])
                if parsed_size is not None:
                    size = parsed_size
            elif part == "b":
                bold = True
            elif part == "i":
                italic = True

        return cls(
            font_list=font_list,
            size=points_to_pixels(size),
            bold=bold,
            italic=italic,
        )

    def primary_font(self) -> FontSelection:
        if self.font_list:
            return FontSelection.named(self.font_list[0])
        return FontSelection.default()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontOptions):
            return NotImplemented
        size_equal = abs(self.size - other.size) < F32_EPSILON
        if math.isnan(self.size) or math.isnan(other.size):
            size_equal = False
        return (
            self.font_list == other.font_list
            and size_equal
            and self.bold == other.bold
            and self.italic == other.italic
        )

    __hash__ = None  # type: ignore[assignment]