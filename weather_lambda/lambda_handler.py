"""AWS Lambda entry point for API Gateway proxy requests."""

from typing import Any

from weather_lambda.config import get_settings
from weather_lambda.core.service_context import get_service_context
from weather_lambda.logging_config import get_logger, log_with_context, setup_logging

_settings = get_settings()
setup_logging(_settings.log_level, _settings.log_format)

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Handle one API Gateway proxy event.

    Args:
        event: API Gateway proxy request; ``queryStringParameters`` may be null
        context: Lambda context object (unused beyond logging)

    Returns:
        API Gateway proxy response dict
    """
    params = event.get("queryStringParameters") or {}
    city = params.get("city")

    log_with_context(
        logger,
        "info",
        "Handling weather request",
        request_id=getattr(context, "aws_request_id", None),
        event_type="lambda_invocation",
    )

    try:
        response = get_service_context().handler.handle(city)
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Unhandled exception",
            error=str(e),
            error_type=type(e).__name__,
            event_type="unhandled_error",
        )
        logger.error("Exception traceback:", exc_info=True)
        return {"statusCode": 500, "headers": JSON_HEADERS, "body": ""}

    return {
        "statusCode": response.status_code,
        "headers": JSON_HEADERS,
        "body": response.body,
    }
