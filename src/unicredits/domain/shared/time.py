"""Timestamps. Everything the domain stores is timezone-aware UTC."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(value: datetime) -> datetime:
    """Treat a naive datetime as UTC.

    SQLite drops the offset of ``DateTime(timezone=True)`` columns, so rows
    read back from it come out naive.
    """
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
