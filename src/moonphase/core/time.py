from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
import re
from typing import Union

from .errors import DateParseError

Instant = Union[date, datetime]

_DAY = timedelta(days=1)
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# ============================================================
# Instants
# ============================================================

def to_datetime(instant: Instant) -> datetime:
    """
    Promote a date to a datetime at host-local midnight; datetimes pass through.
    """
    if isinstance(instant, datetime):
        return instant
    return datetime.combine(instant, time())


def as_aware(instant: Instant) -> datetime:
    """
    Attach a timezone to an instant.

    Naive datetimes (and plain dates) are host-local wall-clock time, the
    same reading a browser Date built from local fields gets.
    """
    dt = to_datetime(instant)
    if dt.tzinfo is None:
        return dt.astimezone()
    return dt


def elapsed_days(instant: Instant, epoch: datetime) -> float:
    """
    Fractional days from epoch to instant (negative before the epoch).
    Exact to the microsecond; no truncation to whole days.
    """
    return (as_aware(instant) - epoch) / _DAY


def add_days(instant: Instant, n: int) -> datetime:
    """
    Same wall-clock time, n calendar days later.

    Aware datetimes on the host offset step in local wall-clock time and
    are re-localized, so a DST change in between moves the UTC offset
    rather than the clock reading.
    """
    dt = to_datetime(instant)
    if dt.tzinfo is not None and dt.tzinfo is not timezone.utc and dt.utcoffset() == dt.astimezone().utcoffset():
        return (dt.replace(tzinfo=None) + timedelta(days=n)).astimezone()
    return dt + timedelta(days=n)


def now() -> datetime:
    """Host clock, as an aware datetime in the host timezone."""
    return datetime.now().astimezone()


# ============================================================
# Julian dates
# ============================================================

_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def datetime_to_jd(instant: Instant) -> float:
    """
    Instant -> JD (UTC).
    """
    return _JD_UNIX_EPOCH + elapsed_days(instant, _UNIX_EPOCH)


def date_to_jdn(d: date) -> int:
    """Gregorian date -> Julian Day Number (Fliegel-Van Flandern)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


# ============================================================
# Parsing
# ============================================================

def parse_instant(s: str) -> Instant:
    """
    Parse 'YYYY-MM-DD' into a date, or an ISO 8601 datetime
    ('YYYY-MM-DDTHH:MM[:SS][Z|+HH:MM]') into a datetime.
    """
    s = s.strip()
    try:
        if _DATE_RE.match(s):
            y, m, d = map(int, s.split("-"))
            return date(y, m, d)
        if s.endswith(("Z", "z")):
            s = s[:-1] + "+00:00"
        return datetime.fromisoformat(s)
    except ValueError as e:
        raise DateParseError(f"Cannot parse date '{s}': expected YYYY-MM-DD or ISO datetime") from e
