"""Weather client for the tomorrow.io realtime API."""

from urllib.parse import unquote_plus

import httpx
from pydantic import ValidationError

from weather_lambda.config import Settings, get_settings
from weather_lambda.exceptions import (
    ConfigurationException,
    ErrorCode,
    WeatherAPIException,
    WeatherException,
)
from weather_lambda.logging_config import get_logger, log_with_context
from weather_lambda.models.weather import UpstreamWeatherResponse

logger = get_logger(__name__)


class WeatherClient:
    """Fetches current conditions for a city with a single GET.

    No retries: one best-effort attempt per call, bounded by the client's
    timeout.
    """

    def __init__(self, client: httpx.Client, settings: Settings | None = None):
        self.client = client
        self.settings = settings or get_settings()

    def fetch(self, city: str) -> UpstreamWeatherResponse:
        """Get realtime weather for ``city``.

        Args:
            city: Sanitized (percent-encoded) city name, sent as the ``location`` parameter

        Returns:
            Decoded provider response

        Raises:
            ConfigurationException: If no API key is configured
            WeatherAPIException: If the provider answers with a non-2xx status
            WeatherException: On transport or decode failure
        """
        api_key = self.settings.weather_api_key
        if not api_key:
            raise ConfigurationException(
                "Weather API key is not configured",
                code=ErrorCode.CONFIG_MISSING,
                details={"setting": "WEATHER_API_KEY"},
            )

        params = {
            # city arrives percent-encoded; httpx encodes params itself
            "location": unquote_plus(city),
            "apikey": api_key,
        }

        log_with_context(
            logger,
            "info",
            "Fetching weather data",
            city=city,
            event_type="weather_fetch",
        )

        try:
            response = self.client.get(
                self.settings.weather_api_url,
                params=params,
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            data = response.json()

            # Validate and parse into Pydantic model
            weather = UpstreamWeatherResponse.model_validate(data)

        except httpx.HTTPStatusError as e:
            raise WeatherAPIException(
                f"Weather API request failed (HTTP {e.response.status_code}): {e.response.text}",
                status_code=e.response.status_code,
                details={"api_response": e.response.text, "city": city},
            ) from e
        except httpx.HTTPError as e:
            raise WeatherException(
                f"Failed to fetch weather data: {str(e)}",
                details={"error_type": "network_error", "city": city},
            ) from e
        except (ValueError, ValidationError) as e:
            raise WeatherException(
                f"Failed to process weather data: {str(e)}",
                details={"error_type": "parsing_error", "city": city},
            ) from e

        log_with_context(
            logger,
            "info",
            "Successfully fetched weather data",
            city=city,
            location_name=weather.location.name,
            event_type="weather_fetched",
        )
        return weather
