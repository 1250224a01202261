"""Colours: palette entries, W3C named colours and 24-bit RGB values.

A :class:`Color` is an integer.  The low values are palette indexes as
used by ECMA-48 and XTerm.  Flag bits above the palette range mark a
value as valid, as a literal RGB value, or as special.  The zero value
is the terminal default colour.

Named colours are class attributes, for example ``Color.RED``,
``Color.CADET_BLUE`` or ``Color.DARK_GREY``.
"""

from __future__ import annotations

import re
from typing import Any

from termcell.colornames import COLOR_NAMES, IDENTIFIER_INDEXES, INDEX_NAMES
from termcell.colortable import COLOR_VALUES

_MASK64 = (1 << 64) - 1
_VALID = 1 << 32
_IS_RGB = 1 << 33
_SPECIAL = 1 << 34

_HEX_DIGITS = re.compile(r"[+-]?[0-9A-Fa-f]+")
_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class Color(int):
    """A colour value; the zero value leaves the terminal default alone."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Color({int(self):#x})"

    def __str__(self) -> str:
        if not self.valid():
            return ""
        return self.name(True)

    def _table_index(self) -> int | None:
        index = int(self) - _VALID
        if 0 <= index < len(COLOR_VALUES):
            return index
        return None

    def valid(self) -> bool:
        """Whether the colour has been set."""
        return bool(self & _VALID)

    def is_rgb(self) -> bool:
        """Whether the colour is a literal RGB value."""
        return self & (_VALID | _IS_RGB) == (_VALID | _IS_RGB)

    def css(self) -> str:
        """The CSS hex string ``#RRGGBB``, or an empty string if unset."""
        if not self.valid():
            return ""
        return "#%06X" % self.hex()

    def name(self, css: bool = False) -> str:
        """The W3C name of the colour.

        Without a name, the CSS hex string is returned if *css* is true,
        otherwise an empty string.
        """
        index = self._table_index()
        if index is not None and index in INDEX_NAMES:
            return INDEX_NAMES[index]
        if css:
            return self.css()
        return ""

    def hex(self) -> int:
        """The 24-bit RGB value ``R << 16 | G << 8 | B``, or -1 if unknown."""
        if not self.valid():
            return -1
        if self & _IS_RGB:
            return int(self) & 0xFFFFFF
        index = self._table_index()
        if index is None:
            return -1
        return COLOR_VALUES[index]

    def rgb(self) -> tuple[int, int, int]:
        """The red, green and blue components, each 0-255, or -1 each."""
        value = self.hex()
        if value < 0:
            return -1, -1, -1
        return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF

    def true_color(self) -> Color:
        """The RGB form of this colour, bypassing terminal theme colours."""
        if not self.valid():
            return COLOR_DEFAULT
        if self & _IS_RGB:
            return Color(self | _VALID)
        return Color((self.hex() & _MASK64) | _IS_RGB | _VALID)


COLOR_DEFAULT = Color(0)
COLOR_VALID = Color(_VALID)
COLOR_IS_RGB = Color(_IS_RGB)
COLOR_SPECIAL = Color(_SPECIAL)
# Return to the vanilla terminal colours.
COLOR_RESET = Color(_SPECIAL)

Color.DEFAULT = COLOR_DEFAULT  # type: ignore[attr-defined]
Color.VALID = COLOR_VALID  # type: ignore[attr-defined]
Color.IS_RGB = COLOR_IS_RGB  # type: ignore[attr-defined]
Color.SPECIAL = COLOR_SPECIAL  # type: ignore[attr-defined]
Color.RESET = COLOR_RESET  # type: ignore[attr-defined]

for _identifier, _index in IDENTIFIER_INDEXES.items():
    setattr(
        Color,
        _WORD_BOUNDARY.sub("_", _identifier).upper(),
        Color(_VALID | _index),
    )


def new_hex_color(v: int) -> Color:
    """A colour from a 24-bit RGB value."""
    return Color(_IS_RGB | (v & _MASK64) | _VALID)


def new_rgb_color(r: int, g: int, b: int) -> Color:
    """A colour from red, green and blue components in the range 0-255."""
    return new_hex_color(((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF))


def get_color(name: str) -> Color:
    """A colour from a W3C name or a ``#rrggbb`` string.

    Unknown names give :data:`COLOR_DEFAULT`.
    """
    index = COLOR_NAMES.get(name)
    if index is not None:
        return Color(_VALID | index)
    if len(name) == 7 and name[0] == "#" and _HEX_DIGITS.fullmatch(name[1:]):
        return new_hex_color(int(name[1:], 16))
    return COLOR_DEFAULT


def palette_color(index: int) -> Color:
    """The colour at the given palette index."""
    return Color((index & _MASK64) | _VALID)


def from_image_color(image_color: Any) -> Color:
    """Convert an image colour to a :class:`Color`, dropping alpha.

    *image_color* is either an object with an ``rgba()`` method giving
    16-bit components, or a sequence of 8-bit ``(r, g, b[, a])`` values.
    """
    rgba = getattr(image_color, "rgba", None)
    if callable(rgba):
        r, g, b, _ = rgba()
        return new_rgb_color(r >> 8, g >> 8, b >> 8)
    r, g, b = tuple(image_color)[:3]
    return new_rgb_color(r, g, b)