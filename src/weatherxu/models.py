"""Pydantic models for WeatherXu requests and responses.

Key model groups:
    1. **Configuration and requests**: ClientConfig, WeatherRequest,
       HistoricalRequest
    2. **Condition records**: Alert, CurrentConditions, HourlyCondition,
       HistoricalHourlyCondition, DailyCondition
    3. **Envelopes**: WeatherResponse, HistoricalResponse, ErrorResponse

Note:
    The API spells condition fields in camelCase (``apparentTemperature``).
    Models expose them as snake_case attributes and accept either spelling.
    Unknown fields are kept, so ``model_dump(by_alias=True,
    exclude_unset=True)`` gives back the body exactly as received.

Example:
    Reading a forecast::

        response = await client.get_weather(40.7128, -74.0060, parts=["hourly"])
        for hour in response.data.hourly.data:
            print(f"{hour.forecast_start}: {hour.temperature}°")
"""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic.alias_generators import to_camel

from .types import DEFAULT_UNITS, Part, Units

Number = Union[int, float]


class ClientConfig(BaseModel):
    """Settings held by a client for its whole lifetime.

    Attributes:
        api_key: API key sent in the ``X-API-KEY`` header.
        units: Default unit system for calls that do not override it.
    """

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    units: Units = DEFAULT_UNITS


class WeatherRequest(BaseModel):
    """Parameters of a current conditions / forecast request.

    Coordinates are forwarded as given. Values outside the documented
    ranges (-90..90, -180..180) are left for the server to reject.

    Attributes:
        lat: Latitude in decimal degrees.
        lon: Longitude in decimal degrees.
        parts: Sections to populate. None lets the server decide.
        units: Unit system for this call only.
    """

    model_config = ConfigDict(frozen=True)

    lat: Number
    lon: Number
    parts: Optional[tuple[Part, ...]] = None
    units: Optional[Units] = None

    @field_validator("units", mode="before")
    @classmethod
    def blank_units_to_none(cls, value: Any) -> Any:
        return value or None

    def to_params(self, default_units: Units) -> dict[str, str]:
        """Serialize to query parameters.

        Args:
            default_units: Units used when the request has no override.

        Returns:
            Query parameters. ``parts`` is present only if requested.

        Example:
            >>> WeatherRequest(lat=1.5, lon=2, parts=["currently", "daily"]).to_params(
            ...     Units.METRIC
            ... )
            {'lat': '1.5', 'lon': '2', 'units': 'metric', 'parts': 'currently,daily'}
        """
        params = {
            "lat": str(self.lat),
            "lon": str(self.lon),
            "units": (self.units or default_units).value,
        }
        if self.parts is not None:
            params["parts"] = ",".join(p.value for p in dict.fromkeys(self.parts))
        return params


class HistoricalRequest(BaseModel):
    """Parameters of a historical conditions request.

    ``start`` and ``end`` are Unix timestamps in seconds. Their order is
    not checked here.
    """

    model_config = ConfigDict(frozen=True)

    lat: Number
    lon: Number
    start: int
    end: int
    units: Optional[Units] = None

    @field_validator("units", mode="before")
    @classmethod
    def blank_units_to_none(cls, value: Any) -> Any:
        return value or None

    def to_params(self, default_units: Units) -> dict[str, str]:
        """Serialize to query parameters."""
        return {
            "lat": str(self.lat),
            "lon": str(self.lon),
            "start": str(self.start),
            "end": str(self.end),
            "units": (self.units or default_units).value,
        }


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class Alert(_Record):
    """Weather alert issued for the location.

    Attributes:
        title: Short alert headline.
        description: Full alert text.
        ends_at: Unix timestamp when the alert expires, if known.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    ends_at: Optional[int] = None


class CurrentConditions(_Record):
    """Conditions at the time of the request.

    Attributes:
        apparent_temperature: "Feels like" temperature.
        cloud_cover: Cloud cover fraction.
        dew_point: Dew point temperature.
        humidity: Relative humidity fraction.
        icon: Condition icon name (e.g. "clear", "rain").
        precip_intensity: Precipitation rate.
        pressure: Sea level pressure.
        temperature: Air temperature.
        uv_index: UV index.
        visibility: Visibility distance.
        wind_direction: Wind direction in degrees.
        wind_gust: Wind gust speed.
        wind_speed: Wind speed.
    """

    apparent_temperature: Optional[float] = None
    cloud_cover: Optional[float] = None
    dew_point: Optional[float] = None
    humidity: Optional[float] = None
    icon: Optional[str] = None
    precip_intensity: Optional[float] = None
    pressure: Optional[float] = None
    temperature: Optional[float] = None
    uv_index: Optional[float] = None
    visibility: Optional[float] = None
    wind_direction: Optional[float] = None
    wind_gust: Optional[float] = None
    wind_speed: Optional[float] = None


class HourlyCondition(CurrentConditions):
    """One hour of a forecast series.

    Same fields as CurrentConditions plus:

    Attributes:
        forecast_start: Unix timestamp of the start of the hour.
        precip_probability: Probability of precipitation (0-1).
    """

    forecast_start: Optional[int] = None
    precip_probability: Optional[float] = None


class HistoricalHourlyCondition(_Record):
    """One observed hour of a historical series."""

    apparent_temperature: Optional[float] = None
    cloud_cover: Optional[float] = None
    dew_point: Optional[float] = None
    forecast_start: Optional[int] = None
    humidity: Optional[float] = None
    icon: Optional[str] = None
    precip_intensity: Optional[float] = None
    pressure: Optional[float] = None
    temperature: Optional[float] = None
    wind_direction: Optional[float] = None
    wind_gust: Optional[float] = None
    wind_speed: Optional[float] = None


class DailyCondition(_Record):
    """One day of a forecast series.

    Aggregates come as ``_avg``/``_max``/``_min`` triples. Time fields
    (``forecast_start``, ``forecast_end``, ``sunrise_time``,
    ``sunset_time``) are Unix timestamps.
    """

    apparent_temperature_avg: Optional[float] = None
    apparent_temperature_max: Optional[float] = None
    apparent_temperature_min: Optional[float] = None
    cloud_cover: Optional[float] = None
    dew_point_avg: Optional[float] = None
    dew_point_max: Optional[float] = None
    dew_point_min: Optional[float] = None
    forecast_end: Optional[int] = None
    forecast_start: Optional[int] = None
    humidity: Optional[float] = None
    icon: Optional[str] = None
    moon_phase: Optional[float] = None
    precip_intensity: Optional[float] = None
    precip_probability: Optional[float] = None
    pressure: Optional[float] = None
    sunrise_time: Optional[int] = None
    sunset_time: Optional[int] = None
    temperature_avg: Optional[float] = None
    temperature_max: Optional[float] = None
    temperature_min: Optional[float] = None
    uv_index_max: Optional[float] = None
    visibility: Optional[float] = None
    wind_direction_avg: Optional[float] = None
    wind_gust_avg: Optional[float] = None
    wind_gust_max: Optional[float] = None
    wind_gust_min: Optional[float] = None
    wind_speed_avg: Optional[float] = None
    wind_speed_max: Optional[float] = None
    wind_speed_min: Optional[float] = None


class HourlyForecast(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: list[HourlyCondition] = Field(default_factory=list)


class DailyForecast(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: list[DailyCondition] = Field(default_factory=list)


class HistoricalHourly(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: list[HistoricalHourlyCondition] = Field(default_factory=list)


class LocationInfo(BaseModel):
    """Location and timezone metadata shared by every response.

    Any field may be missing or null in a successful body.

    Attributes:
        dt: Unix timestamp the response was generated for.
        latitude: Latitude of the resolved location.
        longitude: Longitude of the resolved location.
        timezone: IANA timezone name (e.g. "America/New_York").
        timezone_abbreviation: Short timezone code (e.g. "EST").
        timezone_offset: Offset from UTC in seconds.
        units: Unit system the numbers are expressed in.
    """

    model_config = ConfigDict(extra="allow")

    dt: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    timezone_abbreviation: Optional[str] = None
    timezone_offset: Optional[int] = None
    units: Optional[str] = None


class WeatherData(LocationInfo):
    """Payload of a successful weather response.

    Sections are None when they were not requested through ``parts``.
    """

    alerts: Optional[list[Alert]] = None
    currently: Optional[CurrentConditions] = None
    hourly: Optional[HourlyForecast] = None
    daily: Optional[DailyForecast] = None


class HistoricalData(LocationInfo):
    """Payload of a successful historical response."""

    hourly: Optional[HistoricalHourly] = None


class WeatherResponse(BaseModel):
    """Successful envelope returned by ``get_weather``.

    Example:
        >>> response = await client.get_weather(40.7128, -74.0060)
        >>> response.data.currently.temperature
        21.4
    """

    model_config = ConfigDict(extra="allow")

    success: Literal[True]
    data: Optional[WeatherData] = None


class HistoricalResponse(BaseModel):
    """Successful envelope returned by ``get_historical``."""

    model_config = ConfigDict(extra="allow")

    success: Literal[True]
    data: Optional[HistoricalData] = None


class ErrorDetail(BaseModel):
    """Error description inside a failed envelope.

    Attributes:
        message: Human-readable error message.
        status_code: Provider error code, normalized to a string.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    message: str
    status_code: Optional[str] = Field(default=None, alias="statusCode")

    @field_validator("status_code", mode="before")
    @classmethod
    def code_as_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ErrorResponse(BaseModel):
    """Failed envelope: a 2xx body with ``success: false``.

    Example:
        >>> {"success": False, "error": {"message": "bad key", "statusCode": "401"}}
    """

    model_config = ConfigDict(extra="allow")

    success: Literal[False]
    error: ErrorDetail
