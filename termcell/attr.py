"""Text attributes other than colour."""

from __future__ import annotations

from enum import IntFlag


class AttrMask(IntFlag):
    """A combinable set of text attributes.

    Support for individual attributes varies widely between terminals.
    """

    NONE = 0
    BOLD = 1 << 0
    BLINK = 1 << 1
    REVERSE = 1 << 2
    UNDERLINE = 1 << 3
    DIM = 1 << 4
    ITALIC = 1 << 5
    STRIKE_THROUGH = 1 << 6
    INVALID = 1 << 7