"""Special drawing characters and their ASCII fallbacks.

The names follow the terminfo ACS names, with the ``ACS_`` prefix
replaced by ``RUNE_``.  These characters get special handling, with
ASCII fallbacks for terminals that cannot display them.
"""

from __future__ import annotations

RUNE_STERLING = "\u00a3"
RUNE_DARROW = "\u2193"
RUNE_LARROW = "\u2190"
RUNE_RARROW = "\u2192"
RUNE_UARROW = "\u2191"
RUNE_BULLET = "\u00b7"
RUNE_BOARD = "\u2591"
RUNE_CKBOARD = "\u2592"
RUNE_DEGREE = "\u00b0"
RUNE_DIAMOND = "\u25c6"
RUNE_GEQUAL = "\u2265"
RUNE_PI = "\u03c0"
RUNE_HLINE = "\u2500"
RUNE_LANTERN = "\u00a7"
RUNE_PLUS = "\u253c"
RUNE_LEQUAL = "\u2264"
RUNE_LLCORNER = "\u2514"
RUNE_LRCORNER = "\u2518"
RUNE_NEQUAL = "\u2260"
RUNE_PLMINUS = "\u00b1"
RUNE_S1 = "\u23ba"
RUNE_S3 = "\u23bb"
RUNE_S7 = "\u23bc"
RUNE_S9 = "\u23bd"
RUNE_BLOCK = "\u2588"
RUNE_TTEE = "\u252c"
RUNE_RTEE = "\u2524"
RUNE_LTEE = "\u251c"
RUNE_BTEE = "\u2534"
RUNE_ULCORNER = "\u250c"
RUNE_URCORNER = "\u2510"
RUNE_VLINE = "\u2502"

# Default replacement strings used when a character cannot be displayed
# and no better transformation is available.  Screens take a copy of this
# table; entries may be added, changed or removed per screen.
RUNE_FALLBACKS: dict[str, str] = {
    RUNE_STERLING: "f",
    RUNE_DARROW: "v",
    RUNE_LARROW: "<",
    RUNE_RARROW: ">",
    RUNE_UARROW: "^",
    RUNE_BULLET: "o",
    RUNE_BOARD: "#",
    RUNE_CKBOARD: ":",
    RUNE_DEGREE: "\\",
    RUNE_DIAMOND: "+",
    RUNE_GEQUAL: ">",
    RUNE_PI: "*",
    RUNE_HLINE: "-",
    RUNE_LANTERN: "#",
    RUNE_PLUS: "+",
    RUNE_LEQUAL: "<",
    RUNE_LLCORNER: "+",
    RUNE_LRCORNER: "+",
    RUNE_NEQUAL: "!",
    RUNE_PLMINUS: "#",
    RUNE_S1: "~",
    RUNE_S3: "-",
    RUNE_S7: "-",
    RUNE_S9: "_",
    RUNE_BLOCK: "#",
    RUNE_TTEE: "+",
    RUNE_RTEE: "+",
    RUNE_LTEE: "+",
    RUNE_BTEE: "+",
    RUNE_ULCORNER: "+",
    RUNE_URCORNER: "+",
    RUNE_VLINE: "|",
}