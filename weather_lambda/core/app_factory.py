"""Application factory for the local FastAPI server."""

from fastapi import FastAPI

from weather_lambda import __version__
from weather_lambda.core.lifespan import lifespan
from weather_lambda.middleware.error_handlers import register_error_handlers
from weather_lambda.routers import health_router, weather_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Serves the same request pipeline as the Lambda entry point, for local
    development and testing.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Weather Lambda",
        description="Current weather by city, cached in-process and persisted to DynamoDB.",
        version=__version__,
        lifespan=lifespan,
    )

    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])
    app.include_router(weather_router.router, tags=["weather"])

    return app
