"""W3C colour names and the palette indexes they refer to.

Names are lower case, as written in CSS.  Both spellings of "gray" and
"grey" are accepted; the "gray" spelling comes first, so reverse lookups
prefer it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from termcell.colortable import BASE_COLORS, EXTENDED_BASE, EXTENDED_COLORS

# Alternate spellings, mapped to the canonical identifier they stand for.
GREY_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "Grey": "Gray",
        "DimGrey": "DimGray",
        "DarkGrey": "DarkGray",
        "DarkSlateGrey": "DarkSlateGray",
        "LightGrey": "LightGray",
        "LightSlateGrey": "LightSlateGray",
        "SlateGrey": "SlateGray",
    }
)


def _identifier_indexes() -> dict[str, int]:
    indexes: dict[str, int] = {
        name: index for index, (name, _) in enumerate(BASE_COLORS)
    }
    indexes.update(
        (name, EXTENDED_BASE + offset)
        for offset, (name, _) in enumerate(EXTENDED_COLORS)
    )
    indexes.update(
        (alias, indexes[canonical]) for alias, canonical in GREY_ALIASES.items()
    )
    return indexes


# Identifier (e.g. "CadetBlue", "DarkGrey") to palette index.
IDENTIFIER_INDEXES: Mapping[str, int] = MappingProxyType(_identifier_indexes())

# Written W3C name (e.g. "cadetblue", "darkgrey") to palette index.
COLOR_NAMES: Mapping[str, int] = MappingProxyType(
    {name.lower(): index for name, index in IDENTIFIER_INDEXES.items()}
)


def _index_names() -> dict[int, str]:
    names: dict[int, str] = {}
    for name, index in COLOR_NAMES.items():
        names.setdefault(index, name)
    return names


# Palette index to its preferred written name.
INDEX_NAMES: Mapping[int, str] = MappingProxyType(_index_names())