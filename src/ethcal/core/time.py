from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Protocol


class ClockSource(Protocol):
    def today(self) -> date: ...


class SystemClock:
    """Current civil date in UTC."""

    def today(self) -> date:
        return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class FixedClock:
    """Clock stuck on one day; for tests and reproducible output."""
    fixed: date

    def today(self) -> date:
        return self.fixed


def iso_weekday(jdn: int) -> int:
    """ISO weekday (1=Mon..7=Sun) of a Julian Day Number. JDN 0 fell on a Monday."""
    return jdn % 7 + 1
