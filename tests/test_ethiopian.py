# tests/test_ethiopian.py

import random
from dataclasses import replace

import pytest

import ethcal
from ethcal import InvalidDateError, OutOfRangeError
from ethcal.core.types import CalendarId
from ethcal.engines.ethiopian import EthiopianCalendar, EthiopianParams

ETH = ethcal.get_calendar("ethiopian")
GREG = ethcal.get_calendar("gregorian")


def test_known_fixture_from_jdn():
    d = ETH.from_jdn(2459951)
    assert d.calendar == "ethiopian"
    assert (d.year, d.month, d.day) == (2015, 4, 28)
    assert d.month_name == "ታኅሣሥ"
    assert d.day_name == "ዐርብ"
    assert d.weekday == 5


def test_known_fixture_to_jdn():
    assert ETH.to_jdn(ETH.date(2015, 4, 28)) == 2459951


def test_epoch():
    assert ETH.first_jdn == 1724221
    assert ETH.from_jdn(1724221).ymd == (1, 1, 1)
    with pytest.raises(InvalidDateError):
        ETH.from_jdn(1724220)


@pytest.mark.parametrize(
    "eth,greg",
    [
        ((2015, 4, 28), (2023, 1, 6)),
        ((2015, 13, 5), (2023, 9, 10)),
        ((2015, 13, 6), (2023, 9, 11)),
        ((2016, 1, 1), (2023, 9, 12)),
        ((2016, 4, 28), (2024, 1, 7)),
        ((2016, 13, 5), (2024, 9, 10)),
        ((2017, 1, 1), (2024, 9, 11)),
    ],
)
def test_cross_calendar_fixtures(eth, greg):
    e = ETH.date(*eth)
    g = GREG.date(*greg)
    assert ETH.to_jdn(e) == GREG.to_jdn(g)
    assert ETH.from_jdn(GREG.to_jdn(g)) == e
    assert GREG.from_jdn(ETH.to_jdn(e)) == g


def test_new_year_names():
    d = ETH.date(2016, 1, 1)
    assert d.month_name == "መስከረም"
    assert d.day_name == "ማክሰኞ"
    assert str(d) == "ማክሰኞ መስከረም 1 2016"


def test_pagume_boundary_leap_year():
    p5 = ETH.date(2015, 13, 5)
    p6 = ETH.date(2015, 13, 6)
    ny = ETH.date(2016, 1, 1)
    assert p6.month_name == "ጳጉሜን"
    assert ETH.to_jdn(p5) + 1 == ETH.to_jdn(p6)
    assert ETH.to_jdn(p6) + 1 == ETH.to_jdn(ny)
    assert ETH.from_jdn(ETH.to_jdn(p6)).ymd == (2015, 13, 6)
    assert ETH.from_jdn(ETH.to_jdn(p6) + 1).ymd == (2016, 1, 1)
    assert p5 < p6 < ny


def test_pagume_boundary_common_year():
    p5 = ETH.date(2016, 13, 5)
    assert ETH.from_jdn(ETH.to_jdn(p5) + 1).ymd == (2017, 1, 1)
    with pytest.raises(InvalidDateError):
        ETH.date(2016, 13, 6)


@pytest.mark.parametrize("year,leap", [(3, True), (4, False), (2011, True), (2015, True), (2016, False), (2019, True)])
def test_leap_years(year, leap):
    assert ETH.is_leap_year(year) is leap
    assert ETH.days_in_month(year, 13) == (6 if leap else 5)
    assert ETH.days_in_month(year, 1) == 30


def test_year_lengths_match_jdn():
    for y in range(1, 200):
        span = ETH.to_jdn(ETH.date(y + 1, 1, 1)) - ETH.to_jdn(ETH.date(y, 1, 1))
        assert span == (366 if ETH.is_leap_year(y) else 365)


@pytest.mark.parametrize("y,m,d", [(2015, 4, 31), (2015, 1, 0), (2015, 13, 7), (0, 1, 1)])
def test_invalid_dates(y, m, d):
    with pytest.raises(InvalidDateError):
        ETH.date(y, m, d)


@pytest.mark.parametrize("m", [0, 14])
def test_invalid_month_is_out_of_range(m):
    with pytest.raises(OutOfRangeError):
        ETH.date(2015, m, 1)


def test_round_trip_keeps_names():
    random.seed(11)
    for _ in range(2000):
        y = random.randint(1, 4000)
        m = random.randint(1, 13)
        dd = random.randint(1, ETH.days_in_month(y, m))
        d = ETH.date(y, m, dd)
        assert ETH.from_jdn(ETH.to_jdn(d)) == d


def test_consecutive_days():
    """Walk day by day across several leap cycles; labels must advance one step at a time."""
    j0 = ETH.to_jdn(ETH.date(2010, 12, 25))
    prev = ETH.from_jdn(j0)
    for jdn in range(j0 + 1, j0 + 3 * 1461):
        cur = ETH.from_jdn(jdn)
        if prev.day < ETH.days_in_month(prev.year, prev.month):
            expected = (prev.year, prev.month, prev.day + 1)
        elif prev.month < 13:
            expected = (prev.year, prev.month + 1, 1)
        else:
            expected = (prev.year + 1, 1, 1)
        assert cur.ymd == expected
        assert cur.weekday == prev.weekday % 7 + 1
        assert prev < cur
        prev = cur


def test_monotonic():
    random.seed(5)
    for _ in range(2000):
        j1, j2 = sorted(random.sample(range(1724221, 3000000), 2))
        d1, d2 = ETH.from_jdn(j1), ETH.from_jdn(j2)
        assert d1 < d2
        assert ETH.to_jdn(d1) < ETH.to_jdn(d2)


def test_weekday_comes_from_gregorian():
    assert ETH.gregorian is GREG
    random.seed(9)
    for _ in range(500):
        jdn = random.randint(1724221, 3000000)
        assert ETH.from_jdn(jdn).weekday == GREG.from_jdn(jdn).weekday


def test_standalone_calendar_builds_its_own_gregorian():
    eth = EthiopianCalendar(CalendarId(family="civil", name="ethiopian", version="1"))
    assert eth.from_jdn(2459951) == ETH.from_jdn(2459951)


def test_month_and_day_names():
    assert ETH.month_name(1) == "መስከረም"
    assert ETH.month_name(13) == "ጳጉሜን"
    assert ETH.day_name(7) == "እሁድ"
    for n in (0, 14, -1):
        with pytest.raises(OutOfRangeError):
            ETH.month_name(n)
    for n in (0, 8):
        with pytest.raises(OutOfRangeError):
            ETH.day_name(n)


def test_params_validation():
    with pytest.raises(ValueError):
        EthiopianParams(min_year=0)


def test_early_years_of_an_older_era():
    # Amete Alem: 5500 years before Amete Mihret, its first years fall before Gregorian year 1
    aa = EthiopianCalendar(
        CalendarId(family="custom", name="amete_alem", version="1"),
        EthiopianParams(jd_offset=-285019),
    )
    d = aa.date(100, 1, 1)
    jdn = aa.to_jdn(d)
    assert jdn == -248494
    assert d.weekday == 7
    assert d.day_name == "እሁድ"
    assert aa.from_jdn(jdn) == d
    assert aa.from_jdn(jdn + 1).weekday == 1
    assert aa.from_jdn(aa.first_jdn).ymd == (1, 1, 1)


def test_to_jdn_rejects_inconsistent_fields():
    good = ETH.date(2015, 4, 28)
    for bad in (
        replace(good, month_name="መስከረም"),
        replace(good, day_name="ሰኞ"),
        replace(good, weekday=1),
    ):
        with pytest.raises(InvalidDateError):
            ETH.to_jdn(bad)
    assert ETH.to_jdn(good) == 2459951
