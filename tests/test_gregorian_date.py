# tests/test_gregorian_date.py

import random
from datetime import date, timedelta

import pytest

from paschal import GregorianDate, InvalidDateError, OutOfRangeError
from paschal.core.time import MAX_YEAR, MIN_YEAR


def test_construction_validates():
    GregorianDate(2024, 2, 29)
    GregorianDate(-1000, 2, 28)
    with pytest.raises(InvalidDateError):
        GregorianDate(1900, 2, 29)
    with pytest.raises(InvalidDateError):
        GregorianDate(2023, 13, 1)
    with pytest.raises(InvalidDateError):
        GregorianDate(MIN_YEAR - 1, 1, 1)


def test_plus_days_matches_datetime():
    random.seed(7)
    start = date(1, 1, 1)
    for _ in range(2000):
        d = start + timedelta(days=random.randint(0, 3_000_000))
        n = random.randint(-5000, 5000)
        try:
            want = d + timedelta(days=n)
        except OverflowError:
            continue
        assert GregorianDate.from_date(d).plus_days(n).to_date() == want


def test_plus_days_rolls_backward_over_year_zero():
    assert GregorianDate(1, 1, 1).plus_days(-1) == GregorianDate(0, 12, 31)
    assert GregorianDate(0, 3, 1).plus_days(-1) == GregorianDate(0, 2, 29)


def test_plus_days_out_of_range():
    with pytest.raises(OutOfRangeError):
        GregorianDate(MAX_YEAR, 12, 31).plus_days(1)
    with pytest.raises(OutOfRangeError):
        GregorianDate(MIN_YEAR, 1, 1).plus_days(-1)


def test_to_date_bounds():
    assert GregorianDate(2017, 4, 16).to_date() == date(2017, 4, 16)
    with pytest.raises(OutOfRangeError):
        GregorianDate(0, 1, 1).to_date()
    with pytest.raises(OutOfRangeError):
        GregorianDate(10000, 1, 1).to_date()


def test_weekday_matches_datetime():
    for d in (date(2017, 4, 16), date(2000, 1, 1), date(1583, 4, 10), date(9999, 12, 31)):
        assert GregorianDate.from_date(d).weekday() == d.weekday()


def test_today():
    assert GregorianDate.today().to_date() == date.today()


def test_formatting_and_ordering():
    d = GregorianDate(2017, 4, 16)
    assert d.month_name() == "April"
    assert d.formatted() == "16 April 2017"
    assert GregorianDate(2017, 3, 31) < d < GregorianDate(2018, 1, 1)
