from __future__ import annotations
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from zoneinfo import ZoneInfo

SIXTY = Decimal(60)
HOUR_PLACES = Decimal("0.01")


def utcnow_iso() -> str:
    """Current UTC time as an ISO-8601 string with microsecond precision.

    Lexical order of these strings matches chronological order, which the
    timeline relies on.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat(timespec="microseconds") + "Z"


def parse_iso(ts: str | None, tz: str) -> datetime | None:
    """Parse an ISO-8601 timestamp string.
    If naive, attach the provided tz. Returns None if ts is falsy.
    """
    if not ts:
        return None
    dt = datetime.fromisoformat(ts.replace('Z', '+00:00'))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo(tz))
    return dt


def compute_minutes(start_iso: str | None, end_iso: str | None, tz: str) -> int:
    """Return whole minutes between start and end (non-negative)."""
    s = parse_iso(start_iso, tz)
    e = parse_iso(end_iso, tz)
    if not s or not e:
        return 0
    delta = int((e - s).total_seconds() // 60)
    return max(delta, 0)


def minutes_to_hours(mins: int) -> Decimal:
    """Convert whole minutes to hours, two decimal places, half-up."""
    if mins <= 0:
        return Decimal("0.00")
    return (Decimal(mins) / SIXTY).quantize(HOUR_PLACES, rounding=ROUND_HALF_UP)


def hours_between(start_iso: str | None, end_iso: str | None, tz: str) -> Decimal:
    return minutes_to_hours(compute_minutes(start_iso, end_iso, tz))
