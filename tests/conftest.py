from __future__ import annotations

import pytest

from requests_mock import Mocker

from openmeteo_lambda.handler import WeatherProxyHandler, get_handler
from openmeteo_lambda.providers.openmeteo import OpenMeteoProvider


BASE_URL = "https://openmeteo.test/v1/forecast"


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def provider() -> OpenMeteoProvider:
    provider = OpenMeteoProvider(base_url=BASE_URL)
    yield provider
    provider.close()


@pytest.fixture
def handler(provider: OpenMeteoProvider) -> WeatherProxyHandler:
    return WeatherProxyHandler(provider)


@pytest.fixture(autouse=True)
def _reset_shared_handler():
    get_handler.cache_clear()
    yield
    get_handler.cache_clear()
