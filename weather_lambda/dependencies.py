"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from weather_lambda.core.service_context import ServiceContext


async def get_service_context(request: Request) -> ServiceContext:
    """
    Get the process-wide service context from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared ServiceContext instance.

    Raises:
        RuntimeError: If the service context is not initialized.
    """
    context: ServiceContext | None = getattr(request.app.state, "service_context", None)

    if context is None:
        raise RuntimeError("Service context not initialized.")

    return context
