"""Request pipeline: validate, cache lookup, fetch, persist, respond."""

from urllib.parse import quote_plus

from weather_lambda.cache import TTLCache
from weather_lambda.exceptions import (
    SerializationException,
    ValidationException,
    WeatherException,
    WeatherLambdaException,
)
from weather_lambda.logging_config import get_logger, log_with_context
from weather_lambda.models.base_models import HandlerResponse
from weather_lambda.models.weather import WeatherRecord
from weather_lambda.protocols import RecordStore, WeatherFetcher

logger = get_logger(__name__)


def sanitize_city(city: str | None) -> str:
    """Turn a raw ``city`` parameter into its canonical key.

    Surrounding whitespace is stripped and the rest is percent-encoded, so
    the same input always maps to the same cache key, store key and
    upstream ``location`` value.

    Raises:
        ValidationException: If the city is missing or blank
    """
    normalized = (city or "").strip()
    if not normalized:
        raise ValidationException("City parameter is required", details={"parameter": "city"})
    return quote_plus(normalized)


class WeatherRequestHandler:
    """Runs one weather request to a terminal response.

    Steps run strictly in order: validate, cache read, then on a miss fetch,
    persist and cache write. A record is cached only after it was persisted.
    Nothing is retried.
    """

    def __init__(
        self,
        cache: TTLCache[WeatherRecord],
        weather_client: WeatherFetcher,
        store: RecordStore,
    ):
        self.cache = cache
        self.weather_client = weather_client
        self.store = store

    def handle(self, city: str | None) -> HandlerResponse:
        """Handle a request for ``city``.

        Args:
            city: Raw ``city`` query parameter (may be None)

        Returns:
            HandlerResponse: 200 with the record JSON, 400 for a missing
            city, 500 for any fetch, persistence or encoding failure
        """
        try:
            key = sanitize_city(city)
        except ValidationException as e:
            log_with_context(
                logger,
                "warning",
                e.message,
                error_code=e.code.value,
                event_type="request_invalid",
            )
            return HandlerResponse(status_code=e.status_code)

        cached_record = self.cache.get(key)
        if cached_record is not None:
            log_with_context(
                logger,
                "info",
                "Returning cached data",
                city=key,
                event_type="request_cache_hit",
            )
            return self._respond(cached_record)

        try:
            record = self._fetch_and_store(key)
        except WeatherLambdaException as e:
            log_with_context(
                logger,
                "error",
                e.message,
                city=key,
                error_code=e.code.value,
                details=e.details,
                event_type="request_failed",
            )
            return HandlerResponse(status_code=500)

        self.cache.set(key, record)

        log_with_context(
            logger,
            "info",
            "Returning new data",
            city=key,
            event_type="request_fresh",
        )
        return self._respond(record)

    def _fetch_and_store(self, key: str) -> WeatherRecord:
        upstream = self.weather_client.fetch(key)

        try:
            record = WeatherRecord.from_upstream(key, upstream)
        except ValueError as e:
            raise WeatherException(
                f"Failed to process weather data: {str(e)}",
                details={"error_type": "parsing_error"},
            ) from e

        self.store.save(record)
        return record

    def _respond(self, record: WeatherRecord) -> HandlerResponse:
        try:
            body = record.to_body()
        except ValueError as e:
            error = SerializationException(
                f"Error marshalling response data: {str(e)}",
                details={"city": record.city},
            )
            log_with_context(
                logger,
                "error",
                error.message,
                city=record.city,
                error_code=error.code.value,
                event_type="response_serialization_failed",
            )
            return HandlerResponse(status_code=error.status_code)

        return HandlerResponse(status_code=200, body=body)
