"""UTC time helpers shared by entities and API responses."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time truncated to millisecond precision (what MongoDB stores)."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def isoformat_utc(value: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with milliseconds and a trailing Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
