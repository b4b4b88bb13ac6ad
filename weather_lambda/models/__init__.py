"""Weather Lambda models"""

from weather_lambda.models.base_models import ErrorResponse, HandlerResponse, HealthResponse
from weather_lambda.models.weather import (
    UpstreamWeatherResponse,
    WeatherData,
    WeatherLocation,
    WeatherRecord,
    WeatherValues,
)

__all__ = [
    "ErrorResponse",
    "HandlerResponse",
    "HealthResponse",
    "UpstreamWeatherResponse",
    "WeatherData",
    "WeatherLocation",
    "WeatherRecord",
    "WeatherValues",
]
