"""Referrer-based routing: picks a journey payload from the Referer/Origin headers."""

from __future__ import annotations

from typing import Any, Dict, Tuple

from api_virtualization.contracts import StubRequest, StubResponse

# Checked in order; the first matching rule wins.
JOURNEY_RULES: Tuple[Tuple[Tuple[str, ...], Dict[str, Any]], ...] = (
    (
        ("personal-loan", "pl-journey"),
        {
            "journeyType": "PERSONAL_LOAN",
            "productCode": "PL",
            "status": "ELIGIBLE",
            "offer": {"maxAmount": 4000000, "interestRate": 10.5, "tenureMonths": 60},
        },
    ),
    (
        ("credit-card", "cc-journey"),
        {
            "journeyType": "CREDIT_CARD",
            "productCode": "CC",
            "status": "ELIGIBLE",
            "offer": {"cardVariant": "REGALIA", "creditLimit": 300000},
        },
    ),
    (
        ("home-loan", "hl-journey"),
        {
            "journeyType": "HOME_LOAN",
            "productCode": "HL",
            "status": "ELIGIBLE",
            "offer": {"maxAmount": 7500000, "interestRate": 8.75, "tenureMonths": 240},
        },
    ),
)


def referrer_based_response(request: StubRequest) -> StubResponse:
    referer = str(request.headers.get("Referer") or "")
    origin = str(request.headers.get("Origin") or "")
    haystack = f"{referer} {origin}".lower()

    for keywords, payload in JOURNEY_RULES:
        if any(keyword in haystack for keyword in keywords):
            return StubResponse.json_response(200, dict(payload))

    return StubResponse.json_response(
        200,
        {
            "journeyType": "GENERIC",
            "status": "PENDING",
            "message": "No journey matched the request referrer",
            "referer": referer,
            "origin": origin,
        },
    )
