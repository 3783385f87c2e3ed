from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from .core.engine import Calendar, CalendarRegistry
from .core.time import ClockSource, SystemClock
from .core.types import CalendarSpec, Date
from .engines.factory import make_calendar as _make_calendar

log = logging.getLogger(__name__)

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    log.debug("calendar registry installed: %s", reg.list())
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(calendar: str) -> Calendar:
    return _reg().get(calendar)

def make_calendar(spec: CalendarSpec) -> Calendar:
    return _make_calendar(spec, gregorian=_reg().get("gregorian"))

def register_calendar(name: str, cal: Calendar, *, overwrite: bool = False) -> None:
    _reg().register(name, cal, overwrite=overwrite)

# ============================================================
# Dates and JDN
# ============================================================

def make_date(year: int, month: int, day: int, *, calendar: str = "gregorian") -> Date:
    return _reg().get(calendar).date(year, month, day)

def to_jdn(d: Date) -> int:
    return _reg().get(d.calendar).to_jdn(d)

def from_jdn(jdn: int, *, calendar: str) -> Date:
    return _reg().get(calendar).from_jdn(jdn)

def convert(d: Date, *, to: str) -> Date:
    """Translate a date into another calendar through its JDN."""
    return _reg().get(to).from_jdn(to_jdn(d))

def from_pydate(d: date, *, calendar: str = "gregorian") -> Date:
    """Read a datetime.date (always Gregorian) into the given calendar."""
    g = _reg().get("gregorian").date(d.year, d.month, d.day)
    if calendar == "gregorian":
        return g
    return convert(g, to=calendar)

def to_pydate(d: Date) -> date:
    g = d if d.calendar == "gregorian" else convert(d, to="gregorian")
    return date(g.year, g.month, g.day)

def today(*, calendar: str = "ethiopian", clock: Optional[ClockSource] = None) -> Date:
    """Today's date in `calendar`, as reported by `clock` (UTC system clock by default)."""
    if clock is None:
        clock = SystemClock()
    return from_pydate(clock.today(), calendar=calendar)

# ============================================================
# Calendar rules and names
# ============================================================

def month_name(n: int, *, calendar: str) -> str:
    return _reg().get(calendar).month_name(n)

def day_name(n: int, *, calendar: str) -> str:
    return _reg().get(calendar).day_name(n)

def months_in_year(*, calendar: str) -> int:
    return _reg().get(calendar).months_in_year()

def days_in_month(year: int, month: int, *, calendar: str) -> int:
    return _reg().get(calendar).days_in_month(year, month)

def is_leap_year(year: int, *, calendar: str) -> bool:
    return _reg().get(calendar).is_leap_year(year)
