"""
ethcal.names
------------
Static month and weekday names. Indices are 1-based; weekdays run Monday first
(ISO numbering), so index 1 is Monday and index 7 is Sunday.
"""

from __future__ import annotations

from typing import Tuple

from .core.errors import OutOfRangeError

GREGORIAN_MONTHS: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

GREGORIAN_WEEKDAYS: Tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

ETHIOPIAN_MONTHS: Tuple[str, ...] = (
    "መስከረም",
    "ጥቅምት",
    "ኅዳር",
    "ታኅሣሥ",
    "ጥር",
    "የካቲት",
    "መጋቢት",
    "ሚያዝያ",
    "ግንቦት",
    "ሰኔ",
    "ሐምሌ",
    "ነሐሴ",
    "ጳጉሜን",  # Pagume, 5 or 6 days
)

ETHIOPIAN_WEEKDAYS: Tuple[str, ...] = (
    "ሰኞ",
    "ማክሰኞ",
    "ረቡዕ",
    "ኀሙስ",
    "ዐርብ",
    "ቅዳሜ",
    "እሁድ",
)


def lookup(table: Tuple[str, ...], n: int, what: str) -> str:
    """Return table[n-1], refusing anything outside 1..len(table)."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise OutOfRangeError(f"{what} index must be an integer, got {n!r}")
    if not (1 <= n <= len(table)):
        raise OutOfRangeError(f"{what} index {n} outside 1..{len(table)}")
    return table[n - 1]


def gregorian_month_name(n: int) -> str:
    return lookup(GREGORIAN_MONTHS, n, "Gregorian month")


def gregorian_day_name(n: int) -> str:
    return lookup(GREGORIAN_WEEKDAYS, n, "Gregorian weekday")


def ethiopian_month_name(n: int) -> str:
    return lookup(ETHIOPIAN_MONTHS, n, "Ethiopian month")


def ethiopian_day_name(n: int) -> str:
    return lookup(ETHIOPIAN_WEEKDAYS, n, "Ethiopian weekday")
