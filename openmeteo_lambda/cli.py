"""Invoke the weather handler locally, the way API Gateway would."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from .entities import Request, Response
from .handler import WeatherProxyHandler, build_handler
from .settings import Settings, configure_logging


DEFAULT_LAT = "40.7128"
DEFAULT_LON = "-74.0060"


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise argparse.ArgumentTypeError(f"unknown log level {value!r}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openmeteo-lambda",
        description="Fetch current weather through the proxy handler",
    )
    parser.add_argument("lat", nargs="?", default=DEFAULT_LAT, help="Latitude")
    parser.add_argument("lon", nargs="?", default=DEFAULT_LON, help="Longitude")
    parser.add_argument(
        "--log-level",
        default=None,
        type=_log_level,
        help="Logging level (defaults to LOG_LEVEL)",
    )
    return parser


def render(response: Response, stream: TextIO) -> None:
    stream.write("----- Response -----\n")
    stream.write(f"StatusCode: {response.status_code}\n")
    stream.write("Headers:\n")
    for name, value in response.headers.items():
        stream.write(f"  {name}: {value}\n")
    stream.write("Body:\n")
    stream.write(f"{response.body}\n")
    stream.write("--------------------\n")


def main(
    argv: Optional[Sequence[str]] = None,
    handler: Optional[WeatherProxyHandler] = None,
    stream: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    if handler is None:
        settings = Settings.from_env()
        configure_logging(args.log_level or settings.log_level)
        handler = build_handler(settings)

    request = Request(query_params={"lat": args.lat, "lon": args.lon})
    render(handler.handle(request), stream or sys.stdout)
    return 0


__all__ = ["build_parser", "main", "render"]
