"""RFC 3339 ``date-time`` recognition for the ``timestamp`` type."""

from __future__ import annotations

import re

_RFC3339_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})"
    r"[Tt]([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.[0-9]+)?"
    r"(?:[Zz]|[+-]([0-9]{2}):([0-9]{2}))"
)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _days_in_month(year: int, month: int) -> int:
    if month == 2 and _is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_rfc3339_timestamp(value: str) -> bool:
    """Return True if *value* is a full RFC 3339 ``date-time``.

    Requires a time-offset and a calendar-valid date.  Year 0000 and the
    leap second ``:60`` are accepted, which ``datetime`` cannot represent,
    so fields are range-checked by hand.
    """
    m = _RFC3339_RE.fullmatch(value)
    if m is None:
        return False

    year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
    if not 1 <= month <= 12:
        return False
    if not 1 <= day <= _days_in_month(year, month):
        return False
    if hour > 23 or minute > 59 or second > 60:
        return False

    off_hour, off_minute = m.group(7), m.group(8)
    if off_hour is not None and (int(off_hour) > 23 or int(off_minute) > 59):
        return False
    return True
