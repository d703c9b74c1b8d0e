from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError
from requests import Response

from .base import UpstreamFormatError, WeatherProvider
from ..entities import Coordinate
from ..schemas import CurrentWeather


INVALID_JSON = "Unexpected response format from weather API (invalid JSON)."
MISSING_CURRENT_WEATHER = "Unexpected response format from weather API (missing current_weather)."
INVALID_CURRENT_WEATHER = "Unexpected response format from weather API (invalid current_weather)."


class OpenMeteoProvider(WeatherProvider):
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    def current_weather(self, coordinate: Coordinate) -> CurrentWeather:
        # The caller's text goes upstream untouched; re-formatting the parsed
        # floats could change precision.
        params = {
            "latitude": coordinate.latitude_text,
            "longitude": coordinate.longitude_text,
            "current_weather": "true",
        }
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        if not isinstance(data, dict) or "current_weather" not in data:
            self._log.warning("Upstream body has no current_weather: %s", response.text)
            raise UpstreamFormatError(MISSING_CURRENT_WEATHER)
        try:
            return CurrentWeather.model_validate(data["current_weather"])
        except ValidationError as exc:
            self._log.warning("Upstream current_weather rejected: %s", exc)
            raise UpstreamFormatError(INVALID_CURRENT_WEATHER) from exc

    # helpers ------------------------------------------------------------
    def _json(self, response: Response) -> Any:
        try:
            return response.json(parse_constant=_reject_constant)
        except ValueError as exc:
            self._log.warning("Failed to decode JSON", exc_info=exc)
            raise UpstreamFormatError(INVALID_JSON) from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


__all__ = [
    "INVALID_CURRENT_WEATHER",
    "INVALID_JSON",
    "MISSING_CURRENT_WEATHER",
    "OpenMeteoProvider",
]
