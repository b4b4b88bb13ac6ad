"""Process-wide service wiring.

A warm Lambda process reuses one ServiceContext across invocations, so the
cache and HTTP connection pool survive between requests. A cold process
starts with an empty cache.
"""

import threading
from dataclasses import dataclass

import httpx

from weather_lambda.cache import TTLCache
from weather_lambda.config import Settings, get_settings
from weather_lambda.core.http_client import create_http_client
from weather_lambda.logging_config import get_logger, log_with_context
from weather_lambda.models.weather import WeatherRecord
from weather_lambda.services.persistence_store import PersistenceStore
from weather_lambda.services.request_handler import WeatherRequestHandler
from weather_lambda.services.weather_client import WeatherClient

logger = get_logger(__name__)


@dataclass
class ServiceContext:
    """Everything a request needs, built once per process."""

    settings: Settings
    http_client: httpx.Client
    cache: TTLCache[WeatherRecord]
    weather_client: WeatherClient
    store: PersistenceStore
    handler: WeatherRequestHandler

    def close(self) -> None:
        """Release the HTTP connection pool."""
        self.http_client.close()
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )


def build_service_context(settings: Settings | None = None) -> ServiceContext:
    """Construct a fresh ServiceContext from settings."""
    settings = settings or get_settings()

    http_client = create_http_client(settings)
    cache: TTLCache[WeatherRecord] = TTLCache(
        ttl_seconds=settings.cache_ttl_seconds,
        sweep_interval_seconds=settings.cache_sweep_interval_seconds,
    )
    weather_client = WeatherClient(http_client, settings)
    store = PersistenceStore(settings)
    handler = WeatherRequestHandler(cache, weather_client, store)

    log_with_context(
        logger,
        "info",
        "Service context initialized",
        cache_ttl_seconds=settings.cache_ttl_seconds,
        cache_sweep_interval_seconds=settings.cache_sweep_interval_seconds,
        event_type="service_context_ready",
    )
    return ServiceContext(
        settings=settings,
        http_client=http_client,
        cache=cache,
        weather_client=weather_client,
        store=store,
        handler=handler,
    )


_context_instance: ServiceContext | None = None
_context_lock = threading.Lock()


def get_service_context() -> ServiceContext:
    """Get the singleton ServiceContext, building it on first use."""
    global _context_instance
    with _context_lock:
        if _context_instance is None:
            _context_instance = build_service_context()
        return _context_instance


def reset_service_context() -> None:
    """Close and drop the singleton ServiceContext."""
    global _context_instance
    with _context_lock:
        if _context_instance is not None:
            _context_instance.close()
            _context_instance = None
