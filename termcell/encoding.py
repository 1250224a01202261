"""Registry of character encodings for non-Unicode terminals.

UTF-8 and US-ASCII are always available.  Other character sets must be
registered, either one by one with :func:`register_encoding` or all at
once through :mod:`termcell.charsets`.
"""

from __future__ import annotations

import codecs
import threading
from enum import IntEnum


class EncodingFallback(IntEnum):
    """What :func:`get_encoding` does for a character set it cannot find."""

    # Give no encoding at all.
    FAIL = 0
    # Fall back to 7-bit ASCII.
    ASCII = 1
    # Assume UTF-8 passes through unmodified.
    UTF8 = 2


_lock = threading.Lock()
_encodings: dict[str, codecs.CodecInfo] = {}
_fallback = EncodingFallback.FAIL


def _codec(enc: str | codecs.CodecInfo) -> codecs.CodecInfo:
    if isinstance(enc, codecs.CodecInfo):
        return enc
    return codecs.lookup(enc)


def register_encoding(charset: str, enc: str | codecs.CodecInfo) -> None:
    """Register an encoding under a character set name.

    *enc* is a codec or the name of one known to :mod:`codecs`; an
    unknown codec name raises ``LookupError``.  Names are case-insensitive,
    and aliases may be registered the same way.
    """
    info = _codec(enc)
    with _lock:
        _encodings[charset.lower()] = info


def set_encoding_fallback(fb: EncodingFallback) -> None:
    """Change what happens when no encoding is registered for a charset."""
    global _fallback
    with _lock:
        _fallback = EncodingFallback(fb)


def get_encoding(charset: str) -> codecs.CodecInfo | None:
    """The codec registered for *charset*, or the fallback.

    With :attr:`EncodingFallback.FAIL` an unknown character set gives
    ``None``.
    """
    with _lock:
        info = _encodings.get(charset.lower())
        if info is not None:
            return info
        if _fallback == EncodingFallback.ASCII:
            return codecs.lookup("ascii")
        if _fallback == EncodingFallback.UTF8:
            return codecs.lookup("utf-8")
        return None


for _name, _codec_name in (
    ("utf-8", "utf-8"),
    ("utf8", "utf-8"),
    ("us-ascii", "ascii"),
    ("ascii", "ascii"),
    ("iso646", "ascii"),
):
    register_encoding(_name, _codec_name)