"""
Fault injection.

A single uniform sample decides the outcome: 10% internal errors, 20% gateway
timeouts and 70% success.
"""

from __future__ import annotations

import random
from typing import Callable, Optional

from api_virtualization.contracts import StubRequest, StubResponse
from api_virtualization.utils.timestamps import epoch_millis, isoformat_utc, utc_now

ERROR_THRESHOLD = 0.1
TIMEOUT_THRESHOLD = 0.3


def unreliable_service(request: StubRequest, rng: Optional[Callable[[], float]] = None) -> StubResponse:
    sample = (rng or random.random)()

    if sample < ERROR_THRESHOLD:
        return StubResponse.json_response(
            500,
            {"error": "Internal Server Error", "message": "Service temporarily unavailable"},
        )
    if sample < TIMEOUT_THRESHOLD:
        return StubResponse.json_response(
            504,
            {"error": "Gateway Timeout", "message": "Request timed out"},
        )

    payload = request.json()
    now = utc_now()
    return StubResponse.json_response(
        200,
        {
            "status": "success",
            "requestId": payload.get("requestId") or f"REQ-{epoch_millis(now)}",
            "timestamp": isoformat_utc(now),
        },
    )
