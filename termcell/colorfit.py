"""Closest-match search for colours within a palette."""

from __future__ import annotations

import math
from typing import Iterable

from termcell.color import COLOR_DEFAULT, Color

_D65 = (0.95047, 1.0, 1.08883)
_EPSILON = (6.0 / 29.0) ** 3


def _linearize(v: float) -> float:
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def _cbrt(t: float) -> float:
    return math.copysign(abs(t) ** (1.0 / 3.0), t)


def _lab_f(t: float) -> float:
    if t > _EPSILON:
        return _cbrt(t)
    return t / 3.0 * 29.0 / 6.0 * 29.0 / 6.0 + 4.0 / 29.0


def _to_lab(c: Color) -> tuple[float, float, float]:
    r, g, b = (_linearize(v / 255.0) for v in c.rgb())
    x = 0.41239079926595948 * r + 0.35758433938387796 * g + 0.18048078840183429 * b
    y = 0.21263900587151036 * r + 0.71516867876775593 * g + 0.072192315360733715 * b
    z = 0.019330818715591851 * r + 0.11919477979462599 * g + 0.95053215224966058 * b
    fx = _lab_f(x / _D65[0])
    fy = _lab_f(y / _D65[1])
    fz = _lab_f(z / _D65[2])
    return 1.16 * fy - 0.16, 5.0 * (fx - fy), 2.0 * (fy - fz)


def find_color(c: Color, palette: Iterable[Color]) -> Color:
    """The palette entry closest to *c* by CIE76 distance.

    An empty palette gives :data:`COLOR_DEFAULT`.  The search is costly,
    so callers should cache the results.
    """
    match = COLOR_DEFAULT
    best = 0.0
    target = _to_lab(c)
    for candidate in palette:
        distance = math.dist(target, _to_lab(candidate))
        if math.isnan(distance):
            distance = math.inf
        if match == COLOR_DEFAULT or distance < best:
            match = candidate
            best = distance
    return match