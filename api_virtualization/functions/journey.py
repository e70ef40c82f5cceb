"""
Stateful journey correlator.

Correlates two stateless calls of a multi-step journey:

- ``DropOffUpdate`` calls mint a correlation id ``<epochMillis>_<sequence>``
  where ``sequence`` counts updates per journey id, starting at 1.
- ``DropOffParam`` calls look the id up and relay the canned remote response
  ``dropoff-param-<sequence>.json``, with the id merged into its body.

State lives in a JourneyStore owned by the correlator. Nothing is persisted;
a restart forgets every id.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from api_virtualization.contracts import JSON_HEADERS, StubRequest, StubResponse
from api_virtualization.error_handler import ErrorHandler
from api_virtualization.utils.config_loader import DEFAULT_MAX_TRACKED_IDS, DEFAULT_REMOTE_BASE_URL
from api_virtualization.utils.timestamps import epoch_millis

logger = logging.getLogger(__name__)

UPDATE_MARKER = "DropOffUpdate"
PARAM_MARKER = "DropOffParam"


@dataclass(frozen=True)
class JourneyRecord:
    journey_id: str
    sequence_number: int


class JourneyStore:
    """
    Per-journey counters and the correlation id map.

    Retention: at most ``max_tracked_ids`` ids are kept; once full, the oldest
    id is evicted on each new record. ``None`` keeps every id for the life of
    the store. Counters are never evicted.
    """

    def __init__(self, max_tracked_ids: Optional[int] = DEFAULT_MAX_TRACKED_IDS) -> None:
        if max_tracked_ids is not None and max_tracked_ids < 1:
            raise ValueError("max_tracked_ids must be at least 1")
        self.max_tracked_ids = max_tracked_ids
        self._counters: Dict[str, int] = {}
        self._ids: "OrderedDict[str, JourneyRecord]" = OrderedDict()
        self._lock = threading.Lock()

    def record_update(self, journey_id: str) -> tuple[str, JourneyRecord]:
        """Take the next sequence number for ``journey_id`` and mint its id."""
        with self._lock:
            sequence_number = self._counters.get(journey_id, 1)
            self._counters[journey_id] = sequence_number + 1

            correlation_id = f"{epoch_millis()}_{sequence_number}"
            record = JourneyRecord(journey_id=journey_id, sequence_number=sequence_number)
            self._ids[correlation_id] = record
            self._ids.move_to_end(correlation_id)
            self._evict()
        return correlation_id, record

    def lookup(self, correlation_id: str) -> Optional[JourneyRecord]:
        with self._lock:
            return self._ids.get(correlation_id)

    def next_sequence(self, journey_id: str) -> int:
        with self._lock:
            return self._counters.get(journey_id, 1)

    def __len__(self) -> int:
        return len(self._ids)

    def _evict(self) -> None:
        if self.max_tracked_ids is None:
            return
        while len(self._ids) > self.max_tracked_ids:
            evicted_id, record = self._ids.popitem(last=False)
            logger.debug("Evicted journey id %s (journey=%s)", evicted_id, record.journey_id)


class JourneyCorrelator:
    def __init__(
        self,
        store: Optional[JourneyStore] = None,
        remote_base_url: Optional[str] = None,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.store = store if store is not None else JourneyStore()
        self.remote_base_url = (
            remote_base_url or os.getenv("JOURNEY_REMOTE_BASE_URL", DEFAULT_REMOTE_BASE_URL)
        ).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport
        self.error_handler = ErrorHandler()

    async def handle(self, request: StubRequest) -> StubResponse:
        path = request.path or ""
        if UPDATE_MARKER in path:
            return self.update(request)
        if PARAM_MARKER in path:
            return await self.param(request)
        return StubResponse.json_response(200, {"status": "OK"})

    def update(self, request: StubRequest) -> StubResponse:
        payload = request.json()
        journey_id = str(payload.get("journeyId") or "default")
        correlation_id, record = self.store.record_update(journey_id)

        logger.info("[UPDATE] Journey:%s ID:%s Response:%d", journey_id, correlation_id, record.sequence_number)
        return StubResponse.json_response(
            200,
            {"status": "SUCCESS", "id": correlation_id, "message": "Journey drop-off data saved"},
        )

    async def param(self, request: StubRequest) -> StubResponse:
        payload = request.json()
        correlation_id = payload.get("id") or payload.get("customerId")
        record = self.store.lookup(str(correlation_id)) if correlation_id else None

        if record is None:
            logger.info("[PARAM] ID:%s not found", correlation_id)
            return StubResponse.json_response(404, {"error": "NOT_FOUND"})

        logger.info("[PARAM] ID:%s Response:%d", correlation_id, record.sequence_number)
        return await self.fetch_remote_response(record.sequence_number, str(correlation_id))

    def remote_url(self, sequence_number: int) -> str:
        return f"{self.remote_base_url}/dropoff-param-{sequence_number}.json"

    async def fetch_remote_response(self, sequence_number: int, correlation_id: str) -> StubResponse:
        url = self.remote_url(sequence_number)
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.get(url, params={"t": epoch_millis()})
                document = response.json()
            if not isinstance(document, dict):
                raise ValueError(f"Remote response is not a JSON object: {url}")

            body: Dict[str, Any] = document.get("responseBody") or {}
            if not isinstance(body, dict):
                raise ValueError(f"Remote responseBody is not a JSON object: {url}")
            body["id"] = correlation_id
            status_code = int(document.get("statusCode") or 200)
            headers = dict(document.get("responseHeaders") or JSON_HEADERS)
        except (httpx.HTTPError, TypeError, ValueError) as e:
            return self.error_handler.handle_exception(e, context={"url": url, "id": correlation_id})

        return StubResponse(status_code=status_code, headers=headers, body=json.dumps(body))
