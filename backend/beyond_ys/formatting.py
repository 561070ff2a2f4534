from __future__ import annotations

import math
from datetime import date, datetime, timezone

UNKNOWN_RELEASE_DATE = "Unknown release date"
UNKNOWN_RELEASE_YEAR = "Unknown release year"

_ISO_PRECISION_LENGTHS: dict[str, int] = {
    "year": 4,
    "month": 7,
    "day": 10,
    "minute": 16,
    "second": 19,
    "millisecond": 23,
}

_PARTIAL_DATE_FORMATS = ("%Y", "%Y-%m", "%Y-%m-%d")


def format_seconds(seconds: float) -> str:
    """Format a duration as ``M:SS`` or ``H:MM:SS``."""
    if seconds <= 0:
        return "0:00"
    total = math.floor(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def _to_utc(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def to_iso_string(value: date | datetime) -> str:
    """UTC ISO string with millisecond precision, e.g. ``2000-01-01T00:00:00.000Z``."""
    dt = _to_utc(value)
    return f"{dt:%Y-%m-%dT%H:%M:%S}.{dt.microsecond // 1000:03d}Z"


def format_iso(value: date | datetime, precision: str) -> str:
    """Truncate the ISO representation of ``value`` to ``precision``."""
    try:
        length = _ISO_PRECISION_LENGTHS[precision]
    except KeyError:
        raise ValueError(f"Unsupported precision '{precision}'") from None
    return to_iso_string(value)[:length]


def parse_release_date(value: str | None) -> datetime | None:
    """Parse a partial-precision release date (``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD``)
    or a full ISO datetime. Returns None when the value is empty or not a date.
    """
    if not value:
        return None
    text = value.strip()
    for fmt in _PARTIAL_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_release_date(value: str | None) -> str:
    """Release date as shown on detail pages. Only the year is displayed."""
    parsed = parse_release_date(value)
    if parsed is None:
        return UNKNOWN_RELEASE_DATE
    return str(parsed.year)


def format_release_year(value: str | None) -> str:
    parsed = parse_release_date(value)
    if parsed is None:
        return UNKNOWN_RELEASE_YEAR
    return str(parsed.year)
