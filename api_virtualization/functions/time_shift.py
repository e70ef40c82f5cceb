"""Time arithmetic response: shifts the supplied instant by two minutes."""

from __future__ import annotations

from datetime import datetime, timedelta

from api_virtualization.contracts import StubRequest, StubResponse
from api_virtualization.utils.timestamps import (
    epoch_millis,
    from_epoch_seconds,
    isoformat_utc,
    parse_iso8601,
    utc_now,
)

SHIFT = timedelta(minutes=2)
SHIFT_MS = 120000


def _parse_time_info(raw_time) -> datetime:
    """Accept an ISO-8601 string or a number of epoch milliseconds."""
    if isinstance(raw_time, (int, float)) and not isinstance(raw_time, bool):
        try:
            return from_epoch_seconds(raw_time / 1000)
        except (OverflowError, OSError) as e:
            raise ValueError(str(e)) from e
    return parse_iso8601(str(raw_time))


def add_two_minutes_to_time(request: StubRequest) -> StubResponse:
    payload = request.json()
    raw_time = payload.get("timeInfo") or None

    if raw_time is None:
        original = utc_now()
        original_text = isoformat_utc(original)
    else:
        try:
            original = _parse_time_info(raw_time)
        except ValueError:
            return StubResponse.json_response(
                400,
                {"error": "BAD_REQUEST", "message": f"timeInfo is not a valid instant: {raw_time}"},
            )
        original_text = raw_time if isinstance(raw_time, str) else isoformat_utc(original)

    updated = original + SHIFT
    body = {key: value for key, value in payload.items() if key != "timeInfo"}
    body.update({
        "original": {"timeInfo": original_text, "timestamp": epoch_millis(original)},
        "updated": {"timeInfo": isoformat_utc(updated), "timestamp": epoch_millis(updated)},
        "modification": {
            "minutesAdded": 2,
            "millisecondsAdded": SHIFT_MS,
            "description": "Added 2 minutes to the original time",
        },
    })

    return StubResponse.json_response(
        200,
        body,
        headers={"X-Processing-Time": isoformat_utc(utc_now())},
    )
