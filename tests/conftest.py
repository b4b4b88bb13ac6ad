"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import boto3
import httpx
import pytest
from botocore.stub import Stubber

from weather_lambda.cache import TTLCache
from weather_lambda.config import Settings
from weather_lambda.models.weather import UpstreamWeatherResponse, WeatherRecord
from weather_lambda.services.request_handler import WeatherRequestHandler


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def mock_settings():
    """Settings instance with test values."""
    return Settings(
        _env_file=None,
        weather_api_key="test-weather-key",
        weather_api_url="https://api.tomorrow.io/v4/weather/realtime",
        db_table_name="WeatherData",
        aws_region="us-west-2",
        cache_ttl_seconds=300,
        cache_sweep_interval_seconds=600,
    )


@pytest.fixture
def fake_clock():
    """Controllable clock for cache TTL tests."""
    return FakeClock()


@pytest.fixture
def cache(fake_clock):
    """Empty weather record cache driven by the fake clock."""
    return TTLCache[WeatherRecord](ttl_seconds=300, sweep_interval_seconds=600, clock=fake_clock)


@pytest.fixture
def mock_weather_response():
    """Mock tomorrow.io realtime API response."""
    return {
        "data": {
            "time": "2024-06-01T18:00:00Z",
            "values": {
                "cloudBase": 1.2,
                "cloudCeiling": None,
                "cloudCover": 35,
                "dewPoint": 10.3,
                "freezingRainIntensity": 0,
                "humidity": 60,
                "precipitationProbability": 0,
                "pressureSurfaceLevel": 1015.2,
                "rainIntensity": 0,
                "sleetIntensity": 0,
                "snowIntensity": 0,
                "temperature": 18.5,
                "temperatureApparent": 18.5,
                "uvHealthConcern": 1,
                "uvIndex": 3,
                "visibility": 16,
                "weatherCode": 1101,
                "windDirection": 250.5,
                "windGust": 6.1,
                "windSpeed": 3.4,
            },
        },
        "location": {
            "lat": 47.6038,
            "lon": -122.3300,
            "name": "Seattle, King County, Washington, United States",
            "type": "administrative",
        },
    }


@pytest.fixture
def mock_weather_client(mock_weather_response):
    """Weather client returning the Seattle fixture."""
    client = MagicMock()
    client.fetch.return_value = UpstreamWeatherResponse.model_validate(mock_weather_response)
    return client


@pytest.fixture
def mock_store():
    """Persistence store that accepts every save."""
    store = MagicMock()
    store.save.return_value = None
    return store


@pytest.fixture
def request_handler(cache, mock_weather_client, mock_store):
    """Request handler wired to a real cache and mocked collaborators."""
    return WeatherRequestHandler(cache, mock_weather_client, mock_store)


@pytest.fixture
def make_http_client():
    """Build an httpx.Client whose requests are answered by ``responder``."""
    clients: list[httpx.Client] = []

    def _make(responder):
        client = httpx.Client(transport=httpx.MockTransport(responder))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def stubbed_table():
    """Real boto3 Table resource with a botocore Stubber on its client."""
    resource = boto3.resource(
        "dynamodb",
        region_name="us-west-2",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    table = resource.Table("WeatherData")
    with Stubber(table.meta.client) as stubber:
        yield table, stubber
