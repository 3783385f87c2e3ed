"""
ethcal.engines.factory
----------------------
Transforms pure data specifications into live calendar objects.
"""

from __future__ import annotations
from typing import Optional

from ..core.engine import Calendar
from ..core.types import CalendarSpec
from .gregorian import GregorianCalendar, GregorianParams
from .ethiopian import EthiopianCalendar, EthiopianParams


def make_calendar(spec: CalendarSpec, *, gregorian: Optional[GregorianCalendar] = None) -> Calendar:
    """
    The universal entry point. `gregorian` is handed to calendars that borrow
    weekday derivation from it; a default one is built when omitted.
    """
    if spec.kind == "gregorian":
        if not isinstance(spec.params, GregorianParams):
            raise TypeError(f"Gregorian spec needs GregorianParams, got {type(spec.params)}")
        return GregorianCalendar(spec.id, spec.params)

    if spec.kind == "ethiopian":
        if not isinstance(spec.params, EthiopianParams):
            raise TypeError(f"Ethiopian spec needs EthiopianParams, got {type(spec.params)}")
        return EthiopianCalendar(spec.id, spec.params, gregorian=gregorian)

    raise TypeError(f"Unknown calendar kind: {spec.kind!r}")
