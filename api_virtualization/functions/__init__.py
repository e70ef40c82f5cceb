"""
Response functions.

Named procedures the stub server calls at request time to build dynamic
responses: random amounts, header-gated auth, injected faults, time arithmetic,
referrer routing and the stateful journey correlator.
"""

from api_virtualization.contracts import Headers, InvalidRequestBodyError, StubRequest, StubResponse
from .journey import JourneyCorrelator, JourneyRecord, JourneyStore
from .registry import (
    ResponseFunction,
    ResponseFunctionRegistry,
    UnknownResponseFunctionError,
    available_function_names,
    default_registry,
    resolve_function_name,
)

__all__ = [
    "Headers",
    "InvalidRequestBodyError",
    "JourneyCorrelator",
    "JourneyRecord",
    "JourneyStore",
    "ResponseFunction",
    "ResponseFunctionRegistry",
    "StubRequest",
    "StubResponse",
    "UnknownResponseFunctionError",
    "available_function_names",
    "default_registry",
    "resolve_function_name",
]
