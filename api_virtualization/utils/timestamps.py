"""ISO-8601 helpers shared by the catalog and the response functions.

All timestamps are rendered in UTC with millisecond precision and a ``Z``
suffix, e.g. ``2025-10-23T10:00:00.000Z``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def isoformat_utc(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    rendered = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return rendered.replace("+00:00", "Z")


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO-8601 instant. Naive values are taken as UTC.

    Raises ValueError when ``value`` is not a valid instant.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def epoch_millis(value: datetime | None = None) -> int:
    moment = value or utc_now()
    return (moment - EPOCH) // timedelta(milliseconds=1)


def from_epoch_seconds(seconds: float) -> datetime:
    """Convert epoch seconds into an aware UTC datetime, truncated to milliseconds."""
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return moment.replace(microsecond=(moment.microsecond // 1000) * 1000)
