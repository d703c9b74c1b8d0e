from __future__ import annotations

import os


os.environ.setdefault("OPEN_METEO_BASE_URL", "https://openmeteo.test/v1/forecast")
os.environ.setdefault("OPEN_METEO_TIMEOUT", "5")
os.environ.setdefault("LOG_LEVEL", "INFO")
