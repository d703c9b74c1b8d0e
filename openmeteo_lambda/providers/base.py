from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response


logger = logging.getLogger(__name__)


class ProviderError(RuntimeError):
    """Base provider error."""


class UpstreamUnavailable(ProviderError):
    """Raised when the upstream could not be reached at all."""


class UpstreamStatusError(ProviderError):
    """Raised when the upstream answers outside the 2xx range."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class UpstreamFormatError(ProviderError):
    """Raised when a successful upstream body does not have the expected shape."""


@dataclass(frozen=True)
class RequestConfig:
    timeout: float = 10.0


class WeatherProvider:
    """Base class that owns the HTTP session and maps transport failures."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or self._build_session(self.request_config)
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_session(self, config: RequestConfig) -> requests.Session:
        return requests.Session()

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise UpstreamStatusError(response.status_code, response.text)
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", url, exc_info=exc)
            raise UpstreamUnavailable(str(exc)) from exc
        return self._handle_response(response)

    def close(self) -> None:
        self.session.close()


__all__ = [
    "ProviderError",
    "RequestConfig",
    "UpstreamFormatError",
    "UpstreamStatusError",
    "UpstreamUnavailable",
    "WeatherProvider",
]
