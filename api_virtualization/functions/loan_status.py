"""Dynamic loan status generator."""

from __future__ import annotations

import random

from api_virtualization.contracts import StubRequest, StubResponse
from api_virtualization.utils.timestamps import isoformat_utc, utc_now

MIN_AMOUNT = 50000
MAX_AMOUNT = 150000


def dynamic_loan_status(request: StubRequest) -> StubResponse:
    payload = request.json()
    loan_id = payload.get("loanId") or "UNKNOWN"
    timestamp = isoformat_utc(utc_now())

    return StubResponse.json_response(
        200,
        {
            "loanId": loan_id,
            "status": "APPROVED",
            "amount": random.randrange(MIN_AMOUNT, MAX_AMOUNT),
            "timestamp": timestamp,
            "message": f"Loan {loan_id} has been approved",
        },
        headers={"X-Response-Time": timestamp},
    )
