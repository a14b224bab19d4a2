from __future__ import annotations
from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return timezone-aware UTC datetime.

    Preferred over deprecated/naive utcnow().
    """
    return datetime.now(timezone.utc)


def iso_utc(dt: datetime | None = None) -> str:
    """Return ISO-8601 UTC string with millisecond precision and a ``Z`` suffix.

    Example: ``2024-05-01T12:30:00.123Z``.
    """
    value = (dt or now_utc()).astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
