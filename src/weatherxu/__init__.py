"""WeatherXu API async client for forecast and historical weather data.

This package exposes the WeatherXu HTTP API as two typed coroutine calls:

Key features:
    - Current conditions, alerts, hourly and daily forecast in one call
    - Hourly historical observations between two Unix timestamps
    - Metric or imperial units, per client or per call
    - Pydantic models for every response section
    - One exception family for configuration, HTTP and API failures
    - Optional DataFrame conversion via weatherxu.dataframe module

Example:
    Fetch a forecast::

        import asyncio
        from weatherxu import Part, WeatherXuClient

        async def main():
            async with WeatherXuClient("your-api-key") as client:
                forecast = await client.get_weather(
                    lat=40.7128,
                    lon=-74.0060,
                    parts=[Part.CURRENTLY, Part.HOURLY],
                )
                print(f"Now: {forecast.data.currently.temperature}°C")
                for hour in forecast.data.hourly.data[:6]:
                    print(f"{hour.forecast_start}: {hour.temperature}°C")

        asyncio.run(main())

    Fetch historical data::

        async with WeatherXuClient("your-api-key", units="imperial") as client:
            history = await client.get_historical(
                lat=40.7128,
                lon=-74.0060,
                start=1704880800,
                end=1704970800,
            )
            print(len(history.data.hourly.data))

    Handle failures::

        from weatherxu import WeatherXuError

        try:
            forecast = await client.get_weather(40.7128, -74.0060)
        except WeatherXuError as e:
            print(e.message, e.status, e.code)

See Also:
    - WeatherXu API docs: https://weatherxu.com/documentation
"""

from .client import WeatherXuClient
from .exceptions import (
    WeatherXuAPIError,
    WeatherXuConfigError,
    WeatherXuConnectionError,
    WeatherXuError,
    WeatherXuHTTPError,
)
from .models import (
    Alert,
    ClientConfig,
    CurrentConditions,
    DailyCondition,
    DailyForecast,
    ErrorDetail,
    ErrorResponse,
    HistoricalData,
    HistoricalHourly,
    HistoricalHourlyCondition,
    HistoricalRequest,
    HistoricalResponse,
    HourlyCondition,
    HourlyForecast,
    WeatherData,
    WeatherRequest,
    WeatherResponse,
)
from .types import (
    DEFAULT_TIMEOUT,
    DEFAULT_UNITS,
    HISTORICAL_API_URL,
    WEATHER_API_URL,
    Part,
    Units,
)

__all__ = [
    "WeatherXuClient",
    "Units",
    "Part",
    "ClientConfig",
    "WeatherRequest",
    "HistoricalRequest",
    "WeatherResponse",
    "WeatherData",
    "HistoricalResponse",
    "HistoricalData",
    "HistoricalHourly",
    "ErrorResponse",
    "ErrorDetail",
    "Alert",
    "CurrentConditions",
    "HourlyCondition",
    "HourlyForecast",
    "HistoricalHourlyCondition",
    "DailyCondition",
    "DailyForecast",
    "WeatherXuError",
    "WeatherXuAPIError",
    "WeatherXuConfigError",
    "WeatherXuConnectionError",
    "WeatherXuHTTPError",
    "WEATHER_API_URL",
    "HISTORICAL_API_URL",
    "DEFAULT_UNITS",
    "DEFAULT_TIMEOUT",
]
