from __future__ import annotations
from typing import Tuple

MIN_YEAR = -999_999_999
MAX_YEAR = 999_999_999

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Both calendars repeat exactly: 400 Gregorian years span 146097 days,
# 4 Julian years span 1461 days.
_GREG_CYCLE_YEARS, _GREG_CYCLE_DAYS = 400, 146097
_JUL_CYCLE_YEARS, _JUL_CYCLE_DAYS = 4, 1461


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_julian_leap(year: int) -> bool:
    return year % 4 == 0


def is_julian_only_leap(year: int) -> bool:
    """Leap in the Julian calendar but not in the Gregorian one (1700, 1800, 1900, 2100, ...)."""
    return year % 100 == 0 and year % 400 != 0


def days_in_month(year: int, month: int, *, calendar: str = "gregorian") -> int:
    if not (1 <= month <= 12):
        raise ValueError(f"month must be in 1..12, got {month}")
    if calendar == "gregorian":
        leap = is_gregorian_leap(year)
    elif calendar == "julian":
        leap = is_julian_leap(year)
    else:
        raise ValueError("calendar must be 'gregorian' or 'julian'")
    if month == 2 and leap:
        return 29
    return _DAYS_IN_MONTH[month]


def is_valid_gregorian_date(year: int, month: int, day: int) -> bool:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        return False
    if not (1 <= month <= 12):
        return False
    return 1 <= day <= days_in_month(year, month)


def is_valid_julian_date(year: int, month: int, day: int) -> bool:
    """
    A Julian date is valid if the same triple is a valid Gregorian date, or if it
    is February 29 of a year that only the Julian rule makes leap.
    """
    if is_valid_gregorian_date(year, month, day):
        return True
    return (
        MIN_YEAR <= year <= MAX_YEAR
        and month == 2
        and day == 29
        and is_julian_only_leap(year)
    )


# ------------------------------------------------------------
# Julian Day Numbers
# ------------------------------------------------------------

def _march_based(year: int, month: int) -> Tuple[int, int]:
    a = (14 - month) // 12
    return year + 4800 - a, month + 12 * a - 3


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian date -> Julian Day Number, exact for any integer year."""
    cycles, y = divmod(year, _GREG_CYCLE_YEARS)
    y2, m2 = _march_based(y, month)
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn + cycles * _GREG_CYCLE_DAYS


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    # shift into the first cycle after JDN 0 so every quotient below is non-negative
    cycles, r = divmod(jdn, _GREG_CYCLE_DAYS)
    a = r + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year + cycles * _GREG_CYCLE_YEARS, month, day


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Julian-calendar date -> Julian Day Number, exact for any integer year."""
    cycles, y = divmod(year, _JUL_CYCLE_YEARS)
    y2, m2 = _march_based(y, month)
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083
    return jdn + cycles * _JUL_CYCLE_DAYS


def jdn_to_julian(jdn: int) -> Tuple[int, int, int]:
    cycles, r = divmod(jdn, _JUL_CYCLE_DAYS)
    c = r + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year + cycles * _JUL_CYCLE_YEARS, month, day
