"""Exception handlers for the local FastAPI server."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from weather_lambda.exceptions import ErrorCode, WeatherLambdaException
from weather_lambda.logging_config import get_logger, log_with_context
from weather_lambda.models import ErrorResponse

logger = get_logger(__name__)


async def weather_lambda_exception_handler(request: Request, exc: WeatherLambdaException) -> JSONResponse:
    """Handle escaped application exceptions with their HTTP status codes."""
    log_with_context(
        logger,
        "warning",
        "Weather Lambda error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        path=request.url.path,
        event_type="weather_lambda_error",
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": ErrorResponse(code=exc.code.value, message=exc.message).model_dump()},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        path=request.url.path,
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=True)

    # Don't expose internal error details to clients
    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR.value, "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(WeatherLambdaException, weather_lambda_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
