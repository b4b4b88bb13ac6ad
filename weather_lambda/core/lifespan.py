"""Application lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from weather_lambda import __version__
from weather_lambda.core.service_context import get_service_context, reset_service_context
from weather_lambda.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the service context on startup and close it on shutdown."""
    log_with_context(
        logger,
        "info",
        "Starting Weather Lambda local server",
        version=__version__,
        event_type="app_startup",
    )

    app.state.service_context = get_service_context()

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Weather Lambda local server",
            event_type="app_shutdown",
        )
        app.state.service_context = None
        reset_service_context()
