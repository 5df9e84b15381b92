"""Shared utilities for time handling."""

from .dates import days_since, ensure_aware, parse_timestamp, utc_now

__all__ = [
    "days_since",
    "ensure_aware",
    "parse_timestamp",
    "utc_now",
]
