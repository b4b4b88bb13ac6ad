"""Protocol definitions for dependency injection."""

from typing import Protocol

from weather_lambda.models.weather import UpstreamWeatherResponse, WeatherRecord


class WeatherFetcher(Protocol):
    """Protocol for weather provider clients.

    Implementations raise a WeatherLambdaException subclass on any failure.
    """

    def fetch(self, city: str) -> UpstreamWeatherResponse:
        """Fetch current weather for a sanitized city name."""
        ...


class RecordStore(Protocol):
    """Protocol for durable weather record stores."""

    def save(self, record: WeatherRecord) -> None:
        """Upsert a record keyed by its city."""
        ...
