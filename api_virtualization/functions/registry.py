"""
Response function registry.

Mock files reference response functions by name (``responseFunction``). The
set of names is closed: ResponseFunction enumerates them and every member must
have a handler in the table, checked when the default registry is built at import.
"""

from __future__ import annotations

import inspect
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

from api_virtualization.contracts import InvalidRequestBodyError, StubRequest, StubResponse
from api_virtualization.error_handler import ErrorHandler

from .auth import conditional_response
from .faults import unreliable_service
from .journey import JourneyCorrelator
from .loan_status import dynamic_loan_status
from .referrer import referrer_based_response
from .time_shift import add_two_minutes_to_time

logger = logging.getLogger(__name__)

Handler = Callable[[StubRequest], Union[StubResponse, Awaitable[StubResponse]]]


class ResponseFunction(str, Enum):
    DYNAMIC_LOAN_STATUS = "dynamicLoanStatus"
    CONDITIONAL_RESPONSE = "conditionalResponse"
    UNRELIABLE_SERVICE = "unreliableService"
    ADD_TWO_MINUTES_TO_TIME = "addTwoMinutesToTime"
    REFERRER_BASED_RESPONSE = "referrerBasedResponse"
    JOURNEY_BASED_RESPONSE = "journeyBasedResponse"


class UnknownResponseFunctionError(LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown response function '{name}'. Available: {', '.join(available_function_names())}"
        )
        self.name = name


def available_function_names() -> List[str]:
    return [member.value for member in ResponseFunction]


def resolve_function_name(name: str) -> ResponseFunction:
    try:
        return ResponseFunction(name)
    except ValueError:
        raise UnknownResponseFunctionError(name) from None


class ResponseFunctionRegistry:
    """Maps every ResponseFunction to its handler.

    The journey correlator is the only stateful handler; pass one in to scope
    its state (tests, separate stub servers).
    """

    def __init__(self, journey: Optional[JourneyCorrelator] = None) -> None:
        self.journey = journey or JourneyCorrelator()
        self.error_handler = ErrorHandler()
        self._handlers: Dict[ResponseFunction, Handler] = {
            ResponseFunction.DYNAMIC_LOAN_STATUS: dynamic_loan_status,
            ResponseFunction.CONDITIONAL_RESPONSE: conditional_response,
            ResponseFunction.UNRELIABLE_SERVICE: unreliable_service,
            ResponseFunction.ADD_TWO_MINUTES_TO_TIME: add_two_minutes_to_time,
            ResponseFunction.REFERRER_BASED_RESPONSE: referrer_based_response,
            ResponseFunction.JOURNEY_BASED_RESPONSE: self.journey.handle,
        }
        missing = set(ResponseFunction) - set(self._handlers)
        if missing:
            raise RuntimeError(f"Response functions without handlers: {sorted(m.value for m in missing)}")

    def get(self, name: Union[str, ResponseFunction]) -> Handler:
        return self._handlers[resolve_function_name(name)]

    async def invoke(
        self,
        name: Union[str, ResponseFunction],
        request: Union[StubRequest, Mapping[str, Any]],
    ) -> StubResponse:
        """
        Run the named response function.

        Raises:
            UnknownResponseFunctionError: If ``name`` is not registered
        """
        handler = self.get(name)
        logger.debug("Invoking response function %s", resolve_function_name(name).value)
        if not isinstance(request, StubRequest):
            request = StubRequest.from_mapping(request)

        try:
            result = handler(request)
            if inspect.isawaitable(result):
                result = await result
        except InvalidRequestBodyError as e:
            return self.error_handler.bad_request(e)
        return result


default_registry = ResponseFunctionRegistry()
