"""Authorization-gated response."""

from __future__ import annotations

from api_virtualization.contracts import StubRequest, StubResponse
from api_virtualization.utils.timestamps import isoformat_utc, utc_now

INVALID_TOKEN = "invalid"


def _bearer_token(authorization: str) -> str:
    value = authorization.strip()
    if value.lower().startswith("bearer "):
        value = value[len("bearer "):]
    return value.strip()


def conditional_response(request: StubRequest) -> StubResponse:
    authorization = request.headers.get("Authorization")

    if not authorization or _bearer_token(str(authorization)) == INVALID_TOKEN:
        return StubResponse.json_response(
            401,
            {"error": "Unauthorized", "message": "Invalid or missing authorization token"},
        )

    return StubResponse.json_response(
        200,
        {
            "status": "success",
            "data": {"authenticated": True, "timestamp": isoformat_utc(utc_now())},
        },
    )
