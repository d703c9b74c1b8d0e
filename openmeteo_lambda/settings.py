"""Environment driven settings for the weather proxy function."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass


DEFAULT_BASE_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_TIMEOUT = 10.0
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class ImproperlyConfigured(RuntimeError):
    """Raised when an environment variable holds an unusable value."""


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        base_url = env("OPEN_METEO_BASE_URL", DEFAULT_BASE_URL).strip()
        if not base_url:
            raise ImproperlyConfigured("OPEN_METEO_BASE_URL must not be empty")

        raw_timeout = env("OPEN_METEO_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ImproperlyConfigured(f"OPEN_METEO_TIMEOUT must be a number, got {raw_timeout!r}") from exc
        if timeout <= 0:
            raise ImproperlyConfigured("OPEN_METEO_TIMEOUT must be positive")

        log_level = env("LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ImproperlyConfigured(f"Unknown LOG_LEVEL {log_level!r}")

        return cls(base_url=base_url, timeout=timeout, log_level=log_level)


def configure_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger unless one is present.

    The Lambda runtime installs its own handler, in which case only the level
    is applied.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


__all__ = ["ImproperlyConfigured", "Settings", "configure_logging", "env"]
