# tests/test_time.py

import random

import pytest

from paschal.core import time as t


@pytest.mark.parametrize("year, greg, jul", [
    (1600, True, True),
    (1700, False, True),
    (1900, False, True),
    (2000, True, True),
    (2024, True, True),
    (2023, False, False),
    (0, True, True),
    (-100, False, True),
    (-400, True, True),
])
def test_leap_rules(year, greg, jul):
    assert t.is_gregorian_leap(year) is greg
    assert t.is_julian_leap(year) is jul
    assert t.is_julian_only_leap(year) is (jul and not greg)


def test_days_in_month():
    assert t.days_in_month(1900, 2) == 28
    assert t.days_in_month(1900, 2, calendar="julian") == 29
    assert t.days_in_month(2000, 2) == 29
    assert t.days_in_month(2023, 4) == 30
    assert t.days_in_month(2023, 12, calendar="julian") == 31

    with pytest.raises(ValueError):
        t.days_in_month(2023, 13)
    with pytest.raises(ValueError):
        t.days_in_month(2023, 1, calendar="coptic")


def test_validity_predicates():
    assert t.is_valid_gregorian_date(2024, 2, 29)
    assert not t.is_valid_gregorian_date(1900, 2, 29)
    assert not t.is_valid_gregorian_date(2023, 13, 1)
    assert not t.is_valid_gregorian_date(2023, 1, 32)
    assert not t.is_valid_gregorian_date(2023, 1, 0)
    assert not t.is_valid_gregorian_date(t.MAX_YEAR + 1, 1, 1)

    assert t.is_valid_julian_date(1900, 2, 29)
    assert t.is_valid_julian_date(-1000, 2, 29)
    assert t.is_valid_julian_date(2000, 2, 29)
    assert not t.is_valid_julian_date(1900, 2, 30)
    assert not t.is_valid_julian_date(1901, 2, 29)
    assert not t.is_valid_julian_date(t.MIN_YEAR - 100, 2, 29)


def test_julian_validity_matches_julian_month_lengths():
    """The explicit two-part rule agrees with the plain every-4th-year leap rule."""
    for year in range(-801, 2401):
        for month in (1, 2, 3):
            n = t.days_in_month(year, month, calendar="julian")
            assert t.is_valid_julian_date(year, month, n)
            assert not t.is_valid_julian_date(year, month, n + 1)


def test_known_jdn():
    assert t.gregorian_to_jdn(2000, 1, 1) == 2451545
    assert t.gregorian_to_jdn(1582, 10, 15) == 2299161
    assert t.julian_to_jdn(1582, 10, 4) == 2299160
    assert t.julian_to_jdn(-4712, 1, 1) == 0
    assert t.gregorian_to_jdn(-4713, 11, 24) == 0


def test_jdn_roundtrip_both_calendars():
    random.seed(42)
    for _ in range(5000):
        jdn = random.randint(-400_000_000, 400_000_000)
        assert t.gregorian_to_jdn(*t.jdn_to_gregorian(jdn)) == jdn
        assert t.julian_to_jdn(*t.jdn_to_julian(jdn)) == jdn


def test_jdn_consecutive_days():
    prev = t.gregorian_to_jdn(-2, 12, 31)
    for year in (-1, 0, 1):
        for month in range(1, 13):
            for day in range(1, t.days_in_month(year, month) + 1):
                cur = t.gregorian_to_jdn(year, month, day)
                assert cur == prev + 1
                prev = cur
