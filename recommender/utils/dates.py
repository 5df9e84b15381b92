"""
Time helpers: timestamp parsing and elapsed-day computation for recency.

All parsing is lenient: anything that cannot be read as a point in time
resolves to None so callers can apply their own fallback.
"""

from datetime import datetime, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_aware(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a content-store timestamp into an aware datetime.

    Accepts datetimes, ISO-8601 strings (trailing "Z" allowed) and numbers
    (epoch milliseconds, as JavaScript clients emit them). Returns None for
    empty or unparseable values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return ensure_aware(value)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return ensure_aware(datetime.fromisoformat(text.replace("Z", "+00:00")))
        except ValueError:
            return None
    return None


def days_since(timestamp: datetime, now: datetime) -> float:
    """Fractional days elapsed from timestamp to now; future timestamps count as 0."""
    delta = ensure_aware(now) - ensure_aware(timestamp)
    return max(delta.total_seconds() / 86400.0, 0.0)
