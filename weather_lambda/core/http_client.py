"""Shared outbound HTTP client."""

import os
from collections.abc import Callable
from typing import Any

import httpx

from weather_lambda.config import Settings
from weather_lambda.logging_config import get_logger, log_with_context
from weather_lambda.utils.redaction import redact_sensitive_data

logger = get_logger(__name__)


def log_request(request: httpx.Request) -> None:
    """Event hook to log requests with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


def log_response(response: httpx.Response) -> None:
    """Event hook to log responses with redacted sensitive data."""
    response.read()  # Ensure response is read
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


def create_http_client(settings: Settings) -> httpx.Client:
    """Create the process-wide HTTP client.

    One client is reused across warm invocations for connection pooling.

    Args:
        settings: Application settings

    Returns:
        Configured httpx.Client
    """
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }

    proxy = os.getenv("HTTPS_PROXY") or os.getenv("HTTP_PROXY")
    if proxy:
        log_with_context(
            logger,
            "info",
            "Using outbound proxy",
            proxy=redact_sensitive_data(proxy),
            event_type="proxy_config",
        )

    client = httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds, connect=5.0),
        limits=httpx.Limits(
            max_keepalive_connections=5,
            max_connections=10,
            keepalive_expiry=30.0,
        ),
        follow_redirects=True,
        proxy=proxy,
        event_hooks=event_hooks,
    )
    log_with_context(
        logger,
        "info",
        "HTTP client initialized successfully",
        event_type="http_client_ready",
    )
    return client
