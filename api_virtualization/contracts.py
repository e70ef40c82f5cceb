"""
Stub request/response contracts.

The stub server hands every response function a request with a raw ``body``
string, a ``headers`` mapping and, when routed by path, a ``path``. Functions
return a status code, headers and a JSON-encoded body.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional

JSON_HEADERS = {"Content-Type": "application/json"}


class InvalidRequestBodyError(ValueError):
    """Raised when a request body is not a JSON object."""


class Headers(Mapping[str, str]):
    """Read-only header mapping with case-insensitive lookup.

    Original casing is kept for iteration.
    """

    def __init__(self, raw: Optional[Mapping[str, Any]] = None) -> None:
        self._items: Dict[str, tuple] = {}
        for name, value in (raw or {}).items():
            self._items[str(name).lower()] = (str(name), value)

    def __getitem__(self, name: str) -> Any:
        return self._items[name.lower()][1]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._items

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Headers({dict(self.items())!r})"


@dataclass
class StubRequest:
    body: str = ""
    headers: Headers = field(default_factory=Headers)
    path: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, Headers):
            self.headers = Headers(self.headers)
        if self.body is None:
            self.body = ""
        if self.path is None:
            self.path = ""

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "StubRequest":
        """Build a request from the dict shape the stub server passes around."""
        body = raw.get("body")
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return cls(body=body or "", headers=raw.get("headers") or {}, path=raw.get("path") or "")

    def json(self) -> Dict[str, Any]:
        """Parse the body as a JSON object. An empty body is ``{}``."""
        if not self.body or not self.body.strip():
            return {}
        try:
            payload = json.loads(self.body)
        except json.JSONDecodeError as e:
            raise InvalidRequestBodyError(f"Request body is not valid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise InvalidRequestBodyError(
                f"Request body must be a JSON object, got {type(payload).__name__}"
            )
        return payload


@dataclass
class StubResponse:
    status_code: int
    headers: Dict[str, str]
    body: str

    @classmethod
    def json_response(
        cls,
        status_code: int,
        payload: Any,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "StubResponse":
        merged = dict(JSON_HEADERS)
        merged.update(headers or {})
        return cls(status_code=status_code, headers=merged, body=json.dumps(payload))

    def json(self) -> Any:
        return json.loads(self.body)

    def to_dict(self) -> Dict[str, Any]:
        return {"statusCode": self.status_code, "headers": dict(self.headers), "body": self.body}
