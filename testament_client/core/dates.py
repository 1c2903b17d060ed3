"""
Date reconstitution for JSON payloads.

JSON has no date type, so the service sends timestamps as ISO-8601 strings.
These helpers walk a decoded body and turn every string leaf that is a strict
ISO-8601 calendar date or date-time back into a ``date``/``datetime``.
"""

import re
from datetime import date, datetime, timedelta, timezone
from typing import Any

_ISO_8601 = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[Tt](?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?"
    r"(?P<tz>[Zz]|[+-]\d{2}(?::?\d{2})?)?)?",
    re.ASCII,
)


def _parse_offset(value: str) -> timezone:
    if value in ("Z", "z"):
        return timezone.utc
    sign = -1 if value[0] == "-" else 1
    digits = value[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:] or 0)
    if minutes >= 60:
        raise ValueError(f"invalid offset minutes: {value}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_date(value: str) -> date | datetime | None:
    """
    Parse a strict ISO-8601 date or date-time.

    Returns:
        ``date`` for date-only input, ``datetime`` for date-time input
        (timezone-aware when an offset is present), or None when the string
        is not a valid ISO-8601 value.

    """
    match = _ISO_8601.fullmatch(value)
    if not match:
        return None

    parts = match.groupdict()
    try:
        if parts["hour"] is None:
            return date(int(parts["year"]), int(parts["month"]), int(parts["day"]))

        fraction = (parts["fraction"] or "")[:6].ljust(6, "0")
        return datetime(
            int(parts["year"]),
            int(parts["month"]),
            int(parts["day"]),
            int(parts["hour"]),
            int(parts["minute"]),
            int(parts["second"] or 0),
            int(fraction),
            tzinfo=_parse_offset(parts["tz"]) if parts["tz"] else None,
        )
    except ValueError:
        # Well-formed but out of range (month 13, day 40, hour 24, ...)
        return None


def is_valid_date(value: str) -> bool:
    """Check if a string is a strict ISO-8601 date or date-time."""
    return parse_date(value) is not None


def revive_dates(value: Any) -> Any:
    """
    Convert every ISO-8601 string leaf of a JSON-like tree into a date value.

    Dicts and lists are rebuilt; non-string leaves and non-date strings are
    returned unchanged. Applying it twice gives the same result as once.
    """
    if isinstance(value, str):
        parsed = parse_date(value)
        return value if parsed is None else parsed
    if isinstance(value, dict):
        return {key: revive_dates(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [revive_dates(item) for item in value]
    return value
