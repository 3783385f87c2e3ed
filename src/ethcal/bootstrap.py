from __future__ import annotations
from typing import Dict

from ethcal.core.engine import Calendar, CalendarRegistry
from ethcal.engines.specs import ALL_SPECS, GREGORIAN_SPEC
from ethcal.engines.factory import make_calendar
from ethcal.engines.gregorian import GregorianCalendar

def build_registry() -> CalendarRegistry:
    # One Gregorian instance, shared with the calendars that take weekdays from it.
    gregorian = GregorianCalendar(GREGORIAN_SPEC.id, GREGORIAN_SPEC.params)
    calendars: Dict[str, Calendar] = {}
    for name, spec in ALL_SPECS.items():
        calendars[name] = gregorian if spec is GREGORIAN_SPEC else make_calendar(spec, gregorian=gregorian)
    return CalendarRegistry(calendars)
