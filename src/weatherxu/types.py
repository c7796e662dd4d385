"""Types and constants for the WeatherXu API client.

This module defines enumerations and configuration constants used
throughout the WeatherXu client.

Example:
    Selecting forecast sections and units::

        from weatherxu import Part, Units, WeatherXuClient

        async with WeatherXuClient("your-api-key") as client:
            forecast = await client.get_weather(
                lat=40.7128,
                lon=-74.0060,
                parts=[Part.CURRENTLY, Part.DAILY],
                units=Units.IMPERIAL,
            )
"""

from enum import Enum


class Units(str, Enum):
    """Measurement system applied to all numeric weather fields.

    Attributes:
        METRIC: Celsius, meters per second, millimeters, hPa.
        IMPERIAL: Fahrenheit, miles per hour, inches.

    Example:
        >>> Units("imperial")
        <Units.IMPERIAL: 'imperial'>
    """

    METRIC = "metric"
    IMPERIAL = "imperial"


class Part(str, Enum):
    """Forecast section the server should populate in a weather response.

    Sections that are not requested are omitted from the response body.

    Attributes:
        ALERTS: Active weather alerts for the location.
        CURRENTLY: Current conditions.
        HOURLY: Hourly forecast series.
        DAILY: Daily forecast series.

    Example:
        >>> ",".join(p.value for p in [Part.CURRENTLY, Part.DAILY])
        'currently,daily'
    """

    ALERTS = "alerts"
    CURRENTLY = "currently"
    HOURLY = "hourly"
    DAILY = "daily"


WEATHER_API_URL = "https://api.weatherxu.com/v1/weather"
"""str: Endpoint for current conditions and forecasts."""

HISTORICAL_API_URL = "https://historical.weatherxu.com/v1/history"
"""str: Endpoint for historical hourly conditions.

Served from a different host than the forecast endpoint.
"""

API_KEY_HEADER = "X-API-KEY"
"""str: Request header carrying the API key."""

DEFAULT_UNITS = Units.METRIC
"""Units: Unit system used when neither the client nor the call sets one."""

DEFAULT_TIMEOUT = 30.0
"""float: Default HTTP request timeout in seconds."""
