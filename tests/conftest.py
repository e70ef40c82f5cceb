"""Pytest fixtures for catalog and response function tests."""

import json

import pytest

from api_virtualization.functions.journey import JourneyCorrelator, JourneyStore
from api_virtualization.functions.registry import ResponseFunctionRegistry


def write_mock(root, relative_path, document):
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(document, str):
        path.write_text(document, encoding="utf-8")
    else:
        path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def mocks_dir(tmp_path):
    """Small mocks tree: two root mocks, one nested mock and a non-JSON file."""
    root = tmp_path / "mocks"
    write_mock(root, "example-loan-status.json", {
        "apiName": "API/LoanStatus",
        "method": "POST",
        "predicate": {"request": {"path": "/loan"}},
        "responseHeaders": {"Content-Type": "application/json"},
        "responseFunction": "dynamicLoanStatus",
    })
    write_mock(root, "example-auth.json", {
        "apiName": "API/Auth",
        "businessName": "Auth check",
        "method": "GET",
        "statusCode": 200,
        "latencyMs": 50,
        "predicate": {"request": {"path": "/auth"}},
        "responseFunction": "conditionalResponse",
    })
    write_mock(root, "personal-loan/pl-etbwo/otp-generation.json", {
        "apiName": "API/PersonalLoan_OTPGeneration",
        "method": "POST",
        "predicate": {"request": {"path": "/otp"}, "headers": {}, "query": {}},
        "responseHeaders": {"Content-Type": "application/json", "X-Trace": "abc"},
        "responseBody": {"Status": "SUCCESS", "otpRefNo": "OTP123"},
    })
    (root / "README.md").write_text("not a mock", encoding="utf-8")
    return root


@pytest.fixture
def journey_store():
    return JourneyStore()


@pytest.fixture
def registry(journey_store):
    """Registry with its own journey state, isolated per test."""
    return ResponseFunctionRegistry(journey=JourneyCorrelator(store=journey_store))
