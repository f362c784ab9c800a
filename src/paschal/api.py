from __future__ import annotations

import logging

from .core.types import EasterInfo
from .engines.computus import eastern_easter, western_easter

log = logging.getLogger(__name__)

# Crucifixion is dated to AD 26..37; no Easter is computed before the earliest bound.
FIRST_EASTER_YEAR = 26
# The Gregorian calendar started in October 1582; 1583 is its first full year.
GREGORIAN_REFORM_YEAR = 1583


def easter_info(
    year: int,
    *,
    first_year: int = FIRST_EASTER_YEAR,
    reform_year: int = GREGORIAN_REFORM_YEAR,
) -> EasterInfo:
    """
    Easter for one year.

    Before reform_year only the Julian computation applies and the Gregorian
    fields stay None. From reform_year on, Western and Eastern Easter are both
    given, the latter also converted to the Gregorian calendar.
    """
    if year < first_year:
        raise ValueError(f"No Easter before AD {first_year}, got {year}")

    jul = eastern_easter(year)
    if year < reform_year:
        log.debug("year %d predates the Gregorian reform (%d); Julian Easter only", year, reform_year)
        return EasterInfo(year=year, eastern_julian=jul)

    info = EasterInfo(
        year=year,
        eastern_julian=jul,
        eastern_gregorian=jul.julian_to_gregorian(),
        western=western_easter(year),
    )
    log.debug("year %d: western=%s eastern=%s coincide=%s", year, info.western, info.eastern_gregorian, info.coincide)
    return info
