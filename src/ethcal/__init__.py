"""ethcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    make_calendar,
    register_calendar,
    make_date,
    to_jdn,
    from_jdn,
    convert,
    from_pydate,
    to_pydate,
    today,
    month_name,
    day_name,
    months_in_year,
    days_in_month,
    is_leap_year,
)
from .core.errors import EthcalError, OutOfRangeError, InvalidDateError
from .core.time import FixedClock, SystemClock
from .core.types import CalendarId, CalendarSpec, Date

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_calendar",
    "register_calendar",
    "make_date",
    "to_jdn",
    "from_jdn",
    "convert",
    "from_pydate",
    "to_pydate",
    "today",
    "month_name",
    "day_name",
    "months_in_year",
    "days_in_month",
    "is_leap_year",
    "EthcalError",
    "OutOfRangeError",
    "InvalidDateError",
    "FixedClock",
    "SystemClock",
    "CalendarId",
    "CalendarSpec",
    "Date",
]
