from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol

from .types import CalendarId, Date

log = logging.getLogger(__name__)


class Calendar(Protocol):
    id: CalendarId

    def info(self) -> Dict[str, Any]: ...
    def date(self, year: int, month: int, day: int) -> Date: ...
    def to_jdn(self, d: Date) -> int: ...
    def from_jdn(self, jdn: int) -> Date: ...
    def months_in_year(self) -> int: ...
    def days_in_month(self, year: int, month: int) -> int: ...
    def is_leap_year(self, year: int) -> bool: ...
    def month_name(self, n: int) -> str: ...
    def day_name(self, n: int) -> str: ...


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, Calendar]

    def get(self, name: str) -> Calendar:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: Calendar, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        # Dates carry id.name and are dispatched back through the registry by it.
        if calendar.id.name != name:
            raise ValueError(f"Calendar registered as '{name}' identifies itself as '{calendar.id.name}'")
        log.debug("registering calendar %r (%s)", name, calendar.id)
        self._calendars[name] = calendar
