"""Detection of the character set the terminal expects."""

from __future__ import annotations

import os
import sys
from typing import Mapping


def _locale_charset(environ: Mapping[str, str]) -> str:
    # Per POSIX the first of LC_ALL, LC_CTYPE and LANG that is set wins.
    locale = (
        environ.get("LC_ALL")
        or environ.get("LC_CTYPE")
        or environ.get("LANG")
        or ""
    )
    if locale in ("POSIX", "C"):
        return "US-ASCII"
    locale = locale.partition("@")[0]
    _, dot, codeset = locale.partition(".")
    if not dot:
        # A locale without a codeset is taken to imply UTF-8.
        return "UTF-8"
    return codeset


def get_charset(environ: Mapping[str, str] | None = None) -> str:
    """The character set named by the locale environment.

    On Windows this is always ``UTF-16``.  Elsewhere the codeset part of
    ``language[.codeset[@variant]]`` is returned; the ``C`` and ``POSIX``
    locales give ``US-ASCII`` and a locale without codeset gives ``UTF-8``.
    """
    if sys.platform == "win32":
        return "UTF-16"
    return _locale_charset(os.environ if environ is None else environ)