"""Error handling helpers for response functions."""
from typing import Any, Dict
import logging

from api_virtualization.contracts import StubResponse

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> StubResponse:
        logger.error("Response function failed: %s (context=%s)", exc, context or {}, exc_info=True)
        return StubResponse.json_response(500, {"error": str(exc) or type(exc).__name__})

    def bad_request(self, exc: Exception) -> StubResponse:
        logger.warning("Rejected request: %s", exc)
        return StubResponse.json_response(400, {"error": "BAD_REQUEST", "message": str(exc)})
