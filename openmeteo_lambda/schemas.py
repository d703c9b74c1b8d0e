"""Typed view over the Open-Meteo ``current_weather`` document."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CurrentWeather(BaseModel):
    """The subset of ``current_weather`` the proxy relies on.

    Strict mode keeps the upstream contract honest: numbers must be JSON
    numbers (integers are accepted, NaN and infinities are not), ``time``
    must be a string. Unknown fields such as ``winddirection`` or
    ``weathercode`` are ignored.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True, allow_inf_nan=False)

    temperature: float
    windspeed: float
    time: str


__all__ = ["CurrentWeather"]
