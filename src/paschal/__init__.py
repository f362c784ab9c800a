"""paschal public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .api import (
    FIRST_EASTER_YEAR,
    GREGORIAN_REFORM_YEAR,
    easter_info,
)
from .core.errors import InvalidDateError, OutOfRangeError, PaschalError
from .core.months import format_dmy, month_name
from .core.time import is_valid_gregorian_date, is_valid_julian_date
from .core.types import ConversionCase, EasterInfo, GregorianDate, JulianDate
from .engines.computus import eastern_easter, western_easter

__all__ = [
    "FIRST_EASTER_YEAR",
    "GREGORIAN_REFORM_YEAR",
    "easter_info",
    "western_easter",
    "eastern_easter",
    "GregorianDate",
    "JulianDate",
    "ConversionCase",
    "EasterInfo",
    "month_name",
    "format_dmy",
    "is_valid_gregorian_date",
    "is_valid_julian_date",
    "PaschalError",
    "InvalidDateError",
    "OutOfRangeError",
]
