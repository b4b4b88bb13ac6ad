"""Pydantic models for weather data."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WeatherValues(BaseModel):
    """Realtime measurements from tomorrow.io.

    The provider omits or nulls fields it has no reading for, so every
    measurement is an explicit optional number.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)

    cloud_base: float | None = None
    cloud_ceiling: float | None = None
    cloud_cover: float | None = None
    dew_point: float | None = None
    freezing_rain_intensity: float | None = None
    humidity: float | None = None
    precipitation_probability: float | None = None
    pressure_surface_level: float | None = None
    rain_intensity: float | None = None
    sleet_intensity: float | None = None
    snow_intensity: float | None = None
    temperature: float | None = None
    temperature_apparent: float | None = None
    uv_health_concern: int | None = None
    uv_index: int | None = None
    visibility: float | None = None
    weather_code: int | None = None
    wind_direction: float | None = None
    wind_gust: float | None = None
    wind_speed: float | None = None


class WeatherData(BaseModel):
    """Observation time plus measurements."""

    time: datetime | None = None
    values: WeatherValues


class WeatherLocation(BaseModel):
    """Location the provider resolved the query to."""

    lat: float | None = None
    lon: float | None = None
    name: str | None = None
    type: str | None = None


class UpstreamWeatherResponse(BaseModel):
    """Raw tomorrow.io realtime API response model."""

    data: WeatherData
    location: WeatherLocation


class WeatherRecord(BaseModel):
    """Current conditions for one city, as cached, stored and returned.

    ``city`` is the canonical (sanitized) key. ``location_name`` is the
    provider's display name for the same place; it is persisted but is not
    part of the response body.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)

    city: str = Field(alias="City", min_length=1)
    temperature: float = Field(alias="Temperature")
    humidity: int = Field(alias="Humidity")
    location_name: str | None = Field(default=None, alias="LocationName")

    def to_body(self) -> str:
        """Serialize to the response body JSON."""
        return self.model_dump_json(by_alias=True, exclude={"location_name"})

    @classmethod
    def from_body(cls, body: str | bytes) -> "WeatherRecord":
        """Decode a response body produced by ``to_body``."""
        return cls.model_validate_json(body)

    @classmethod
    def from_upstream(cls, city: str, data: UpstreamWeatherResponse) -> "WeatherRecord":
        """Project a provider response onto the record for ``city``.

        Args:
            city: Canonical city key
            data: Decoded provider response

        Returns:
            WeatherRecord with temperature and humidity

        Raises:
            ValueError: If the provider did not report temperature or humidity
        """
        values = data.data.values
        if values.temperature is None or values.humidity is None:
            raise ValueError("Weather response is missing temperature or humidity")

        return cls(
            city=city,
            temperature=values.temperature,
            humidity=round(values.humidity),
            location_name=data.location.name,
        )
