from __future__ import annotations

from typing import Dict

from ..core.types import CalendarId, CalendarSpec
from .gregorian import GregorianParams
from .ethiopian import EthiopianParams, JD_OFFSET_AMETE_MIHRET


# ============================================================
# GREGORIAN
# ============================================================

GREGORIAN_SPEC = CalendarSpec(
    id=CalendarId(family="civil", name="gregorian", version="1"),
    kind="gregorian",
    params=GregorianParams(min_year=1),
    meta={"description": "Proleptic Gregorian calendar", "names": "English"},
)


# ============================================================
# ETHIOPIAN
# ============================================================

ETHIOPIAN_SPEC = CalendarSpec(
    id=CalendarId(family="civil", name="ethiopian", version="1"),
    kind="ethiopian",
    params=EthiopianParams(jd_offset=JD_OFFSET_AMETE_MIHRET, min_year=1),
    meta={"description": "Ethiopian calendar, Amete Mihret era", "names": "Amharic"},
)


ALL_SPECS: Dict[str, CalendarSpec] = {
    "gregorian": GREGORIAN_SPEC,
    "ethiopian": ETHIOPIAN_SPEC,
}
