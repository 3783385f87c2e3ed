"""
ethcal.engines.ethiopian
------------------------
Ethiopian (Amete Mihret) calendar <-> Julian Day Number.

Twelve 30-day months followed by Pagume, which has 5 days, or 6 in years
with year % 4 == 3. The leap rule is a flat 4-year cycle of 1461 days with
no century exceptions.

Reference: https://www.geez.org/Calendars/
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.errors import InvalidDateError
from ..core.types import CalendarId, Date
from .. import names
from .gregorian import GregorianCalendar

# JDN of Meskerem 1 of year 0; year 1 starts 365 days later at JDN 1724221
# (Julian 29 August 8 CE).
JD_OFFSET_AMETE_MIHRET = 1723856

DAYS_IN_CYCLE = 4 * 365 + 1


@dataclass(frozen=True)
class EthiopianParams:
    jd_offset: int = JD_OFFSET_AMETE_MIHRET
    min_year: int = 1

    def __post_init__(self) -> None:
        if self.min_year < 1:
            raise ValueError("min_year must be >= 1")


class EthiopianCalendar:
    """
    Weekdays are taken from the Gregorian calendar passed in (or a default
    one); the Ethiopian arithmetic itself never touches Gregorian rules.
    """
    def __init__(
        self,
        id: CalendarId,
        params: EthiopianParams = EthiopianParams(),
        gregorian: Optional[GregorianCalendar] = None,
    ):
        self.id = id
        self.params = params
        if gregorian is None:
            gregorian = GregorianCalendar(CalendarId(family="civil", name="gregorian", version="1"))
        self.gregorian = gregorian
        self.first_jdn = self._jdn(params.min_year, 1, 1)

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "params": self.params.__dict__,
            "first_jdn": self.first_jdn,
            "weekdays_from": self.gregorian.id.name,
        }

    # ---------------------------------------------------------
    # Calendar rules
    # ---------------------------------------------------------

    def months_in_year(self) -> int:
        return 13

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 3

    def days_in_month(self, year: int, month: int) -> int:
        self.month_name(month)  # range check
        if month < 13:
            return 30
        return 6 if self.is_leap_year(year) else 5

    def month_name(self, n: int) -> str:
        return names.ethiopian_month_name(n)

    def day_name(self, n: int) -> str:
        return names.ethiopian_day_name(n)

    def _validate(self, year: int, month: int, day: int) -> None:
        for label, v in (("year", year), ("month", month), ("day", day)):
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidDateError(f"{label} must be an integer, got {v!r}")
        if year < self.params.min_year:
            raise InvalidDateError(f"Ethiopian year {year} is before year {self.params.min_year}")
        dim = self.days_in_month(year, month)
        if not (1 <= day <= dim):
            raise InvalidDateError(f"Ethiopian {year}-{month:02d} has {dim} days, got day {day}")

    # ---------------------------------------------------------
    # Forward: (year, month, day) -> JDN
    # ---------------------------------------------------------

    def _jdn(self, year: int, month: int, day: int) -> int:
        # year // 4 counts the Pagume 6 days that precede Meskerem 1 of `year`.
        return self.params.jd_offset + 365 * year + year // 4 + 30 * (month - 1) + day - 1

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
            raise InvalidDateError(f"JDN {jdn} precedes Ethiopian year {self.params.min_year} (JDN {self.first_jdn})")

        # jdn - offset >= 365 * min_year here, so floor division is the truncation the formula needs.
        k = jdn - self.params.jd_offset
        r = k % DAYS_IN_CYCLE
        n = (r % 365) + 365 * (r // 1460)
        year = 4 * (k // DAYS_IN_CYCLE) + r // 365 - r // 1460
        month = n // 30 + 1
        day = n % 30 + 1

        wd = self.gregorian.weekday(jdn)
        return Date(
            calendar=self.id.name,
            year=year,
            month=month,
            day=day,
            weekday=wd,
            month_name=self.month_name(month),
            day_name=self.day_name(wd),
        )

    def date(self, year: int, month: int, day: int) -> Date:
        """Validated constructor; names and weekday come from the JDN."""
        self._validate(year, month, day)
        return self.from_jdn(self._jdn(year, month, day))
