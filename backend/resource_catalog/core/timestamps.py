"""Timestamps - strict extended ISO-8601 local date-time parsing and formatting.

Invariants:
    - Accepted input: YYYY-MM-DDTHH:MM[:SS[.f{1,6}]], no offset, no date-only form
    - Output: YYYY-MM-DDTHH:MM:SS, with .ffffff only when microseconds are set
    - Pure functions; ValueError on anything malformed (callers map it to a 400)
"""

import re
from datetime import datetime

_ISO_LOCAL_DATE_TIME = re.compile(
    r"^([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2})"
    r"(?::([0-9]{2})(?:\.([0-9]{1,6}))?)?$"
)


def parse_iso_timestamp(value: object) -> datetime:
    """Parse an extended ISO-8601 local date-time.

    datetime instances pass through untouched so ORM rows validate cleanly.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError("timestamp must be an ISO-8601 string")
    match = _ISO_LOCAL_DATE_TIME.match(value.strip())
    if not match:
        raise ValueError(
            f"'{value}' is not an ISO-8601 date-time (expected YYYY-MM-DDTHH:MM:SS)",
        )
    year, month, day, hour, minute, second, fraction = match.groups()
    microsecond = int(fraction.ljust(6, "0")) if fraction else 0
    # datetime() rejects out-of-range parts (month 13, hour 25, Feb 30)
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute),
        int(second or 0), microsecond,
    )


def format_iso_timestamp(value: datetime) -> str:
    """Format a date-time the way clients send it back."""
    timespec = "microseconds" if value.microsecond else "seconds"
    return value.replace(tzinfo=None).isoformat(timespec=timespec)
