"""
ethcal.engines.gregorian
------------------------
Proleptic Gregorian calendar <-> Julian Day Number, integer arithmetic only.

References:
  to_jdn:   the standard shifted-March formula (year starts in March so the
            leap day is the last day of the computational year).
  from_jdn: Fliegel & Van Flandern, CACM 11 (1968) 657.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..core.errors import InvalidDateError
from ..core.time import iso_weekday
from ..core.types import CalendarId, Date
from .. import names


_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class GregorianParams:
    min_year: int = 1

    def __post_init__(self) -> None:
        if self.min_year < 1:
            raise ValueError("min_year must be >= 1 (no year zero in the proleptic formulas)")


class GregorianCalendar:
    def __init__(self, id: CalendarId, params: GregorianParams = GregorianParams()):
        self.id = id
        self.params = params
        self.first_jdn = self._jdn(params.min_year, 1, 1)

    def info(self) -> Dict[str, Any]:
        return {"id": self.id.__dict__, "params": self.params.__dict__, "first_jdn": self.first_jdn}

    # ---------------------------------------------------------
    # Calendar rules
    # ---------------------------------------------------------

    def months_in_year(self) -> int:
        return 12

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def days_in_month(self, year: int, month: int) -> int:
        self.month_name(month)  # range check
        if month == 2 and self.is_leap_year(year):
            return 29
        return _DAYS_IN_MONTH[month - 1]

    def month_name(self, n: int) -> str:
        return names.gregorian_month_name(n)

    def day_name(self, n: int) -> str:
        return names.gregorian_day_name(n)

    def _validate(self, year: int, month: int, day: int) -> None:
        for label, v in (("year", year), ("month", month), ("day", day)):
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidDateError(f"{label} must be an integer, got {v!r}")
        if year < self.params.min_year:
            raise InvalidDateError(f"Gregorian year {year} is before year {self.params.min_year}")
        dim = self.days_in_month(year, month)
        if not (1 <= day <= dim):
            raise InvalidDateError(f"Gregorian {year}-{month:02d} has {dim} days, got day {day}")

    # ---------------------------------------------------------
    # Forward: (year, month, day) -> JDN
    # ---------------------------------------------------------

    @staticmethod
    def _jdn(year: int, month: int, day: int) -> int:
        a = (14 - month) // 12
        y = year + 4800 - a
        m = month + 12 * a - 3
        return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045

    def to_jdn(self, d: Date) -> int:
        if d.calendar != self.id.name:
            raise InvalidDateError(f"{self.id.name} calendar cannot read a {d.calendar} date")
        self._validate(d.year, d.month, d.day)
        jdn = self._jdn(d.year, d.month, d.day)
        if self.from_jdn(jdn) != d:
            raise InvalidDateError(f"Date fields disagree with {self.id.name} day {jdn}: {d!r}")
        return jdn

    # ---------------------------------------------------------
    # Inverse: JDN -> (year, month, day)
    # ---------------------------------------------------------

    def from_jdn(self, jdn: int) -> Date:
        if isinstance(jdn, bool) or not isinstance(jdn, int):
            raise InvalidDateError(f"JDN must be an integer, got {jdn!r}")
        if jdn < self.first_jdn:
            raise InvalidDateError(f"JDN {jdn} precedes Gregorian year {self.params.min_year} (JDN {self.first_jdn})")

        l = jdn + 68569
        n = (4 * l) // 146097
        l = l - (146097 * n + 3) // 4
        i = (4000 * (l + 1)) // 1461001
        l = l - (1461 * i) // 4 + 31
        j = (80 * l) // 2447
        day = l - (2447 * j) // 80
        l = j // 11
        month = j + 2 - 12 * l
        year = 100 * (n - 49) + i + l

        wd = self.weekday(jdn)
        return Date(
            calendar=self.id.name,
            year=year,
            month=month,
            day=day,
            weekday=wd,
            month_name=self.month_name(month),
            day_name=self.day_name(wd),
        )

    def weekday(self, jdn: int) -> int:
        """ISO weekday of any JDN; not limited to years this calendar can label."""
        return iso_weekday(jdn)

    def date(self, year: int, month: int, day: int) -> Date:
        """Validated constructor; names and weekday come from the JDN."""
        self._validate(year, month, day)
        return self.from_jdn(self._jdn(year, month, day))
