"""Value types exchanged between the handler, the validator and providers."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Mapping, Optional


PLAIN_TEXT = {"Content-Type": "text/plain"}
JSON_CONTENT = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Request:
    """Inbound request; only the query string is consulted."""

    query_params: Optional[Mapping[str, str]] = None

    @classmethod
    def from_event(cls, event: Optional[Mapping[str, Any]]) -> "Request":
        """Build a request from an API Gateway proxy event."""
        if not event:
            return cls()
        return cls(query_params=event.get("queryStringParameters"))

    def get(self, name: str) -> Optional[str]:
        if self.query_params is None:
            return None
        return self.query_params.get(name)


@dataclass(frozen=True)
class Coordinate:
    """Validated coordinate pair.

    The original query-string text is kept next to the parsed values so the
    upstream call and the response echo exactly what the caller sent.
    """

    latitude: float
    longitude: float
    latitude_text: str
    longitude_text: str


@dataclass(frozen=True)
class CurrentWeatherReport:
    """Reshaped payload returned to callers. Field order is the wire order."""

    latitude: str
    longitude: str
    temperatura: float
    vento: float
    hora: str

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2, allow_nan=False)


@dataclass
class Response:
    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def text(cls, status_code: int, message: str) -> "Response":
        return cls(status_code=status_code, body=message, headers=dict(PLAIN_TEXT))

    @classmethod
    def json(cls, status_code: int, body: str) -> "Response":
        return cls(status_code=status_code, body=body, headers=dict(JSON_CONTENT))

    def as_dict(self) -> Dict[str, Any]:
        """Serialize into the API Gateway proxy response shape."""
        return {"statusCode": self.status_code, "headers": dict(self.headers), "body": self.body}


__all__ = ["Coordinate", "CurrentWeatherReport", "Request", "Response"]
