from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timedelta, timezone

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)

DateLike = date | datetime | str


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, assuming UTC for naive values."""
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def try_parse_instant(value: DateLike | None) -> datetime | None:
    """Return `value` as an aware UTC datetime, or None when it cannot be read.

    Plain dates map to midnight UTC. Accepts ISO date/datetime strings
    (with optional trailing 'Z').
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time(0, 0), tzinfo=timezone.utc)
    if not isinstance(value, str):
        return None
    s = value.strip()
    if not s:
        return None
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return to_utc(datetime.fromisoformat(s))
    except ValueError:
        try:
            only_date = date.fromisoformat(s)
        except ValueError:
            return None
        return datetime.combine(only_date, time(0, 0), tzinfo=timezone.utc)


def parse_instant(
    value: DateLike | None,
    *,
    fallback: datetime,
    field: str,
    owner: str | None = None,
) -> datetime:
    """Parse `value`, substituting `fallback` when absent or unreadable.

    Unreadable values are logged, never raised.
    """
    parsed = try_parse_instant(value)
    if parsed is not None:
        return parsed
    if value is not None:
        logger.warning("Invalid %s for %s: %r", field, owner or "pig", value)
    return fallback


def days_between(start: datetime, end: datetime) -> int:
    """Whole days elapsed from `start` to `end`, rounded down."""
    return math.floor((end - start) / ONE_DAY)


def days_until(target: datetime, now: datetime) -> int:
    """Days from `now` until `target`, rounded up."""
    return math.ceil((target - now) / ONE_DAY)


def format_day(dt: datetime) -> str:
    return dt.date().isoformat()
