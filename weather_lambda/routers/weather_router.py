"""Weather API route."""

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from weather_lambda.core.service_context import ServiceContext
from weather_lambda.dependencies import get_service_context

router = APIRouter()


@router.get(
    "/weather",
    summary="Get current weather for a city",
    description="""
    Returns current temperature and humidity for `city`.

    Results are cached in-process for 5 minutes; fresh results are persisted
    to DynamoDB before being cached.
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {"City": "Seattle", "Temperature": 18.5, "Humidity": 60},
                }
            },
        },
        400: {"description": "Missing or empty city parameter"},
        500: {"description": "Weather provider, persistence or encoding failure"},
    },
)
async def get_weather(
    city: str | None = Query(default=None, description="City name"),
    context: ServiceContext = Depends(get_service_context),
) -> Response:
    """Get current weather for ``city``.

    The pipeline makes blocking network calls, so it runs in the threadpool.
    """
    result = await run_in_threadpool(context.handler.handle, city)
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type="application/json",
    )
