"""Absolute instants, represented as UTC-aware ``datetime`` values."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

UTC = timezone.utc

ONE_MILLISECOND = timedelta(milliseconds=1)


def as_instant(value: datetime) -> datetime:
    """Normalise *value* to an aware UTC datetime.

    Naive datetimes are taken to already be UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_instant(text: str) -> datetime:
    """Parse an ISO 8601 instant; a ``Z`` suffix means UTC, no offset means UTC."""
    raw = text.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    return as_instant(datetime.fromisoformat(raw))


def format_instant(value: datetime) -> str:
    """ISO 8601 with a ``Z`` suffix and millisecond precision."""
    moment = as_instant(value)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def elapsed_ms(start: datetime, end: datetime) -> int:
    """Signed whole milliseconds from *start* to *end*."""
    return (end - start) // ONE_MILLISECOND
