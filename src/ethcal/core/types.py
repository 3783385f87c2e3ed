from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Tuple

@dataclass(frozen=True)
class CalendarId:
    family: Literal["civil", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class Date:
    """
    A day in one calendar system. Produced by a calendar, never edited:
    month_name, day_name and weekday are derived when the calendar builds it.
    Dates of the same calendar order chronologically; mixing calendars is a TypeError.
    """
    calendar: str
    year: int
    month: int
    day: int
    weekday: int          # ISO: 1=Mon..7=Sun
    month_name: str
    day_name: str

    @property
    def ymd(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def _same_calendar(self, other: Date) -> None:
        if other.calendar != self.calendar:
            raise TypeError(
                f"Cannot order a {self.calendar} date against a {other.calendar} date; convert first."
            )

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        self._same_calendar(other)
        return self.ymd < other.ymd

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        self._same_calendar(other)
        return self.ymd <= other.ymd

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        self._same_calendar(other)
        return self.ymd > other.ymd

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        self._same_calendar(other)
        return self.ymd >= other.ymd

    def __str__(self) -> str:
        return f"{self.day_name} {self.month_name} {self.day} {self.year}"

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar."""
    id: CalendarId
    kind: Literal["gregorian", "ethiopian"]
    params: Any  # GregorianParams | EthiopianParams
    meta: Dict[str, Any] = field(default_factory=dict)
