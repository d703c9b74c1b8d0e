"""Lambda entry point proxying current-weather lookups to Open-Meteo.

The handler validates the ``lat``/``lon`` query parameters, performs a single
upstream call and reshapes ``current_weather`` into a small JSON document.
Every failure is turned into a response; nothing escapes :meth:`handle`.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional

from .entities import CurrentWeatherReport, Request, Response
from .providers.base import RequestConfig, UpstreamFormatError, UpstreamStatusError, UpstreamUnavailable
from .providers.openmeteo import OpenMeteoProvider
from .settings import ImproperlyConfigured, Settings, configure_logging
from .validation import CoordinateError, parse_coordinate


logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error."


class WeatherProxyHandler:
    """Serve reshaped current weather for the requested coordinates."""

    def __init__(self, provider: Optional[OpenMeteoProvider] = None) -> None:
        self._provider = provider or OpenMeteoProvider()

    @property
    def provider(self) -> OpenMeteoProvider:
        return self._provider

    def handle(self, request: Request) -> Response:
        try:
            return self._handle(request)
        except Exception:  # noqa: BLE001
            logger.exception("Unhandled error while serving weather request")
            return Response.text(500, INTERNAL_ERROR)

    def _handle(self, request: Request) -> Response:
        try:
            coordinate = parse_coordinate(request)
        except CoordinateError as exc:
            logger.info("Rejected request: %s", exc)
            return Response.text(400, str(exc))

        try:
            current = self._provider.current_weather(coordinate)
        except UpstreamUnavailable as exc:
            return Response.text(500, f"Error calling weather API: {exc}")
        except UpstreamStatusError as exc:
            return Response.json(exc.status_code, exc.body)
        except UpstreamFormatError as exc:
            return Response.text(502, str(exc))

        report = CurrentWeatherReport(
            latitude=coordinate.latitude_text,
            longitude=coordinate.longitude_text,
            temperatura=current.temperature,
            vento=current.windspeed,
            hora=current.time,
        )
        return Response.json(200, report.to_json())


def build_handler(settings: Settings) -> WeatherProxyHandler:
    provider = OpenMeteoProvider(
        base_url=settings.base_url,
        request_config=RequestConfig(timeout=settings.timeout),
    )
    return WeatherProxyHandler(provider)


@lru_cache(maxsize=1)
def get_handler() -> WeatherProxyHandler:
    """Process-wide handler; its session is reused across warm invocations."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    return build_handler(settings)


def lambda_handler(event: Optional[Mapping[str, Any]], context: Any = None) -> Dict[str, Any]:
    request = Request.from_event(event)
    try:
        handler = get_handler()
    except ImproperlyConfigured:
        logger.exception("Weather proxy is misconfigured")
        return Response.text(500, INTERNAL_ERROR).as_dict()
    return handler.handle(request).as_dict()


__all__ = ["WeatherProxyHandler", "build_handler", "get_handler", "lambda_handler"]
