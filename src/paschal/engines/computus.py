"""
paschal.engines.computus
------------------------
Closed-form Easter computations.

- western_easter: Meeus/Jones/Butcher ("anonymous Gregorian") algorithm, result
  on the Gregorian calendar.
- eastern_easter: Meeus's Julian algorithm, result on the Julian calendar.

Python's // and % floor toward -inf, so every residue below is non-negative and
both functions are total for astronomical BC years as well.
"""

from __future__ import annotations

from ..core.errors import OutOfRangeError
from ..core.time import MAX_YEAR, MIN_YEAR
from ..core.types import GregorianDate, JulianDate


def _check_year(year: int) -> None:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise OutOfRangeError(f"year {year} is outside [{MIN_YEAR}, {MAX_YEAR}]")


def western_easter(year: int) -> GregorianDate:
    """Western (Catholic/Protestant) Easter Sunday as a Gregorian date."""
    _check_year(year)

    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451

    month, day = divmod(h + l - 7 * m + 114, 31)
    return GregorianDate(year, month, day + 1)


def eastern_easter(year: int) -> JulianDate:
    """
    Eastern (Orthodox) Easter Sunday as a Julian date.
    Use .julian_to_gregorian() for the civil date in the modern calendar.
    """
    _check_year(year)

    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7

    month, day = divmod(d + e + 114, 31)
    return JulianDate(year, month, day + 1)
