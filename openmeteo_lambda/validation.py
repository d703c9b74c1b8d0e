"""Query-string coordinate validation."""
from __future__ import annotations

import re
from typing import Optional

from .entities import Coordinate, Request


MISSING_COORDINATES = "Missing 'lat' or 'lon'"
LATITUDE_NOT_NUMERIC = "Latitude must be numeric."
LONGITUDE_NOT_NUMERIC = "Longitude must be numeric."
LATITUDE_OUT_OF_RANGE = "Latitude must be between -90 and 90."
LONGITUDE_OUT_OF_RANGE = "Longitude must be between -180 and 180."

# Locale independent decimal: optional sign, period separator, optional
# exponent. No grouping, no underscores, no nan/inf.
_DECIMAL_RE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)


class CoordinateError(ValueError):
    """Raised when the request does not carry a usable coordinate pair."""


def parse_decimal(value: str) -> Optional[float]:
    """Return ``value`` as a float, or ``None`` when it is not a plain decimal."""
    if not _DECIMAL_RE.match(value):
        return None
    return float(value)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_coordinate(request: Request) -> Coordinate:
    lat = request.get("lat")
    lon = request.get("lon")
    if _is_blank(lat) or _is_blank(lon):
        raise CoordinateError(MISSING_COORDINATES)

    latitude = parse_decimal(lat)
    if latitude is None:
        raise CoordinateError(LATITUDE_NOT_NUMERIC)
    longitude = parse_decimal(lon)
    if longitude is None:
        raise CoordinateError(LONGITUDE_NOT_NUMERIC)

    if not -90 <= latitude <= 90:
        raise CoordinateError(LATITUDE_OUT_OF_RANGE)
    if not -180 <= longitude <= 180:
        raise CoordinateError(LONGITUDE_OUT_OF_RANGE)

    return Coordinate(
        latitude=latitude,
        longitude=longitude,
        latitude_text=lat,
        longitude_text=lon,
    )


__all__ = [
    "CoordinateError",
    "LATITUDE_NOT_NUMERIC",
    "LATITUDE_OUT_OF_RANGE",
    "LONGITUDE_NOT_NUMERIC",
    "LONGITUDE_OUT_OF_RANGE",
    "MISSING_COORDINATES",
    "parse_coordinate",
    "parse_decimal",
]
