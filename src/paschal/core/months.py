from __future__ import annotations
from typing import Tuple

MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month: int) -> str:
    """Month ordinal (1..12) -> English month name."""
    if not (1 <= month <= 12):
        raise ValueError(f"month must be in 1..12, got {month}")
    return MONTH_NAMES[month - 1]


def format_dmy(year: int, month: int, day: int) -> str:
    """
    Render a date as day, month name, year (e.g. "16 April 2017") so that day and
    month can't be confused. Years are astronomical: 1 BC prints as 0.
    """
    return f"{day} {month_name(month)} {year}"
