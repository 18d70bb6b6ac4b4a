"""Timestamp helpers shared by the domain and persistence layers."""

from datetime import UTC, datetime


def ensure_utc(value: datetime) -> datetime:
    """
    Return value as a timezone-aware UTC datetime.

    Naive values are taken to be UTC already. SQLite hands back naive
    datetimes even for DateTime(timezone=True) columns.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
