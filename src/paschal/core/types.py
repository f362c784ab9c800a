from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from .errors import InvalidDateError, OutOfRangeError
from .months import format_dmy, month_name
from .time import (
    MAX_YEAR,
    MIN_YEAR,
    gregorian_to_jdn,
    is_julian_only_leap,
    is_valid_gregorian_date,
    is_valid_julian_date,
    jdn_to_gregorian,
    jdn_to_julian,
    julian_to_jdn,
)


@dataclass(frozen=True, order=True)
class GregorianDate:
    """
    Proleptic Gregorian date with astronomical year numbering.

    datetime.date stops at year 1; this type carries the same y/m/d triple over
    [MIN_YEAR, MAX_YEAR] and converts to/from datetime.date where both overlap.
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not is_valid_gregorian_date(self.year, self.month, self.day):
            raise InvalidDateError(
                f"Invalid Gregorian date (y/m/d): {self.year}/{self.month}/{self.day}"
            )

    @classmethod
    def from_date(cls, d: date) -> GregorianDate:
        return cls(d.year, d.month, d.day)

    @classmethod
    def today(cls) -> GregorianDate:
        return cls.from_date(date.today())

    @classmethod
    def from_jdn(cls, jdn: int) -> GregorianDate:
        y, m, d = jdn_to_gregorian(jdn)
        if not (MIN_YEAR <= y <= MAX_YEAR):
            raise OutOfRangeError(f"JDN {jdn} is outside years [{MIN_YEAR}, {MAX_YEAR}]")
        return cls(y, m, d)

    def to_date(self) -> date:
        if not (1 <= self.year <= 9999):
            raise OutOfRangeError(f"{self.formatted()} cannot be held by datetime.date")
        return date(self.year, self.month, self.day)

    def jdn(self) -> int:
        return gregorian_to_jdn(self.year, self.month, self.day)

    def plus_days(self, days: int) -> GregorianDate:
        """Day arithmetic; rolls over months and years in both directions."""
        return GregorianDate.from_jdn(self.jdn() + days)

    def weekday(self) -> int:
        """Monday == 0 ... Sunday == 6, as datetime.date.weekday()."""
        return self.jdn() % 7

    def month_name(self) -> str:
        return month_name(self.month)

    def formatted(self) -> str:
        return format_dmy(self.year, self.month, self.day)


class ConversionCase(Enum):
    """How a Julian date is shifted onto the Gregorian calendar."""
    ORDINARY = "ordinary"
    # Jan 1 .. Feb 28 of a year that is leap only in the Julian calendar
    BEFORE_LEAP_DAY = "before_leap_day"
    # Feb 29 of such a year; it has no Gregorian namesake
    LEAP_DAY = "leap_day"


@dataclass(frozen=True, order=True)
class JulianDate:
    """
    Date in the Julian calendar, astronomical year numbering (1 BC is 0, 2 BC is -1).

    Same y/m/d domain as GregorianDate, plus the February 29ths of years divisible
    by 100 but not by 400, e.g. JulianDate(1700, 2, 29).
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not is_valid_julian_date(self.year, self.month, self.day):
            raise InvalidDateError(
                f"Invalid Julian date (y/m/d): {self.year}/{self.month}/{self.day}"
            )

    @classmethod
    def from_gregorian(cls, g: GregorianDate) -> JulianDate:
        y, m, d = jdn_to_julian(g.jdn())
        return cls(y, m, d)

    def jdn(self) -> int:
        return julian_to_jdn(self.year, self.month, self.day)

    def month_name(self) -> str:
        return month_name(self.month)

    def formatted(self) -> str:
        return format_dmy(self.year, self.month, self.day)

    def secular_difference(self) -> int:
        """
        Days the Julian calendar lags the Gregorian one in this year (after any
        leap-day adjustment). Negative when the Julian calendar is ahead.
        """
        return self.year // 100 - self.year // 400 - 2

    def conversion_case(self) -> ConversionCase:
        if not is_julian_only_leap(self.year):
            return ConversionCase.ORDINARY
        if self.month == 1 or (self.month == 2 and self.day <= 28):
            return ConversionCase.BEFORE_LEAP_DAY
        if self.month == 2 and self.day == 29:
            return ConversionCase.LEAP_DAY
        return ConversionCase.ORDINARY

    def julian_to_gregorian(self) -> GregorianDate:
        """
        Equivalent Gregorian date, for BC and AD years alike.

        JulianDate(-1000, 2, 29) -> GregorianDate(-1000, 2, 19)
        JulianDate(1900, 2, 29)  -> GregorianDate(1900, 3, 13)
        """
        offset = self.secular_difference()
        day = self.day
        case = self.conversion_case()

        if case is ConversionCase.BEFORE_LEAP_DAY:
            # the Gregorian year has not yet skipped Feb 29, so the lag is one day less
            offset -= 1
        elif case is ConversionCase.LEAP_DAY:
            # no Gregorian Feb 29 this year: start from Feb 28 with the full lag
            day = 28

        return GregorianDate(self.year, self.month, day).plus_days(offset)


@dataclass(frozen=True)
class EasterInfo:
    year: int
    eastern_julian: JulianDate
    eastern_gregorian: Optional[GregorianDate] = None
    western: Optional[GregorianDate] = None

    @property
    def coincide(self) -> bool:
        if self.western is None or self.eastern_gregorian is None:
            return False
        return self.western == self.eastern_gregorian
