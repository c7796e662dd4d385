"""Async client for the WeatherXu weather API.

This module provides WeatherXuClient, which turns the two WeatherXu
endpoints into typed coroutine calls:

    - ``get_weather``: current conditions, alerts, hourly and daily forecast
    - ``get_historical``: observed hourly conditions between two timestamps

Each call is a single GET request. Nothing is cached or retried; a failed
attempt raises a WeatherXuError right away.

Example:
    Fetch current conditions and the daily forecast::

        import asyncio
        from weatherxu import Part, WeatherXuClient

        async def main():
            async with WeatherXuClient("your-api-key") as client:
                response = await client.get_weather(
                    lat=40.7128,
                    lon=-74.0060,
                    parts=[Part.CURRENTLY, Part.DAILY],
                )
                print(response.data.currently.temperature)
                for day in response.data.daily.data:
                    print(day.forecast_start, day.temperature_min, day.temperature_max)

        asyncio.run(main())
"""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any, Optional, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from .exceptions import (
    WeatherXuAPIError,
    WeatherXuConfigError,
    WeatherXuConnectionError,
    WeatherXuError,
    WeatherXuHTTPError,
)
from .models import (
    ClientConfig,
    ErrorResponse,
    HistoricalRequest,
    HistoricalResponse,
    WeatherRequest,
    WeatherResponse,
)
from .types import (
    API_KEY_HEADER,
    DEFAULT_TIMEOUT,
    DEFAULT_UNITS,
    HISTORICAL_API_URL,
    WEATHER_API_URL,
    Part,
    Units,
)

logger = logging.getLogger(__name__)

_WEATHER_ENVELOPE = TypeAdapter(Union[WeatherResponse, ErrorResponse])
_HISTORICAL_ENVELOPE = TypeAdapter(Union[HistoricalResponse, ErrorResponse])


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


@contextmanager
def _wrap_errors(kind: str) -> Iterator[None]:
    """Turn anything that is not a WeatherXuError into one.

    Args:
        kind: Data kind for the message prefix ("weather" or "historical").
    """
    try:
        yield
    except WeatherXuError:
        raise
    except Exception as e:
        raise WeatherXuError(f"Failed to fetch {kind} data: {_describe(e)}") from e


class WeatherXuClient:
    """Async client for the WeatherXu API.

    The client only keeps read-only settings and a lazily created
    httpx.AsyncClient, so one instance can serve concurrent calls.

    Args:
        api_key: WeatherXu API key. Must not be empty.
        units: Default unit system. Defaults to metric.
        timeout: HTTP request timeout in seconds. Defaults to 30.0.

    Raises:
        WeatherXuConfigError: If ``api_key`` is empty or ``units`` is unknown.

    Example:
        Using as async context manager (recommended)::

            async with WeatherXuClient("your-api-key") as client:
                weather = await client.get_weather(40.7128, -74.0060)

        Manual resource management::

            client = WeatherXuClient("your-api-key", units="imperial")
            try:
                weather = await client.get_weather(40.7128, -74.0060)
            finally:
                await client.close()
    """

    def __init__(
        self,
        api_key: str,
        *,
        units: Optional[Union[Units, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not api_key:
            raise WeatherXuConfigError("API key is required")
        try:
            resolved_units = Units(units) if units else DEFAULT_UNITS
        except ValueError as e:
            raise WeatherXuConfigError(
                f"Invalid units {units!r}, expected one of "
                f"{', '.join(u.value for u in Units)}"
            ) from e

        try:
            self._config = ClientConfig(api_key=api_key, units=resolved_units)
        except ValidationError as e:
            raise WeatherXuConfigError(
                f"Invalid API key: expected a string, got {type(api_key).__name__}"
            ) from e
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def config(self) -> ClientConfig:
        """Settings this client was created with."""
        return self._config

    @property
    def units(self) -> Units:
        """Default unit system for calls without an override."""
        return self._config.units

    async def __aenter__(self) -> "WeatherXuClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Return the HTTP client, creating it on first use."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and release resources.

        Safe to call multiple times. A later request opens a new client.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _headers(self) -> dict[str, str]:
        return {
            API_KEY_HEADER: self._config.api_key.get_secret_value(),
            "Content-Type": "application/json",
        }

    async def _fetch(
        self,
        url: str,
        params: dict[str, str],
        envelope: TypeAdapter,
        kind: str,
    ) -> Any:
        """GET ``url`` and unwrap the response envelope.

        Args:
            url: Endpoint URL.
            params: Query parameters.
            envelope: Adapter validating the success or error variant.
            kind: Data kind used in error messages.

        Returns:
            The validated success envelope.

        Raises:
            WeatherXuHTTPError: If the API answers with a non-2xx status.
            WeatherXuConnectionError: If no response was received.
            WeatherXuAPIError: If the body reports ``success: false``.
        """
        client = await self._ensure_client()

        try:
            response = await client.get(url, params=params, headers=self._headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise WeatherXuHTTPError(
                f"{kind.capitalize()} API request failed: {e.response.reason_phrase}",
                status=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise WeatherXuConnectionError(
                f"Failed to fetch {kind} data: {_describe(e)}"
            ) from e

        result = envelope.validate_python(response.json())

        if isinstance(result, ErrorResponse):
            raise WeatherXuAPIError(result.error.message, code=result.error.status_code)

        return result

    async def get_weather(
        self,
        lat: float,
        lon: float,
        *,
        parts: Optional[Sequence[Union[Part, str]]] = None,
        units: Optional[Union[Units, str]] = None,
    ) -> WeatherResponse:
        """Get current conditions and forecast for a location.

        Args:
            lat: Latitude in decimal degrees (-90 to 90).
            lon: Longitude in decimal degrees (-180 to 180).
            parts: Sections to populate (alerts, currently, hourly, daily).
                Sections left out are absent from the response.
            units: Unit system for this call. Defaults to the client's.

        Returns:
            WeatherResponse holding the body as received.

        Raises:
            WeatherXuHTTPError: On a non-2xx HTTP status.
            WeatherXuConnectionError: On network failure.
            WeatherXuAPIError: When the body reports ``success: false``.
            WeatherXuError: On any other failure, e.g. malformed JSON.

        Example:
            >>> async with WeatherXuClient("your-api-key") as client:
            ...     response = await client.get_weather(
            ...         40.7128, -74.0060, parts=["alerts", "currently"]
            ...     )
            ...     for alert in response.data.alerts or []:
            ...         print(alert.title)
        """
        with _wrap_errors("weather"):
            request = WeatherRequest(lat=lat, lon=lon, parts=parts, units=units)
            logger.debug(f"Fetching weather for ({lat}, {lon})")
            return await self._fetch(
                WEATHER_API_URL,
                request.to_params(self._config.units),
                _WEATHER_ENVELOPE,
                "weather",
            )

    async def get_historical(
        self,
        lat: float,
        lon: float,
        start: int,
        end: int,
        *,
        units: Optional[Union[Units, str]] = None,
    ) -> HistoricalResponse:
        """Get observed hourly conditions for a location and time range.

        The range is forwarded as given; an ``end`` before ``start`` is left
        for the server to reject.

        Args:
            lat: Latitude in decimal degrees (-90 to 90).
            lon: Longitude in decimal degrees (-180 to 180).
            start: Range start as a Unix timestamp in seconds.
            end: Range end as a Unix timestamp in seconds.
            units: Unit system for this call. Defaults to the client's.

        Returns:
            HistoricalResponse with the hourly series between start and end.

        Raises:
            WeatherXuHTTPError: On a non-2xx HTTP status.
            WeatherXuConnectionError: On network failure.
            WeatherXuAPIError: When the body reports ``success: false``.
            WeatherXuError: On any other failure, e.g. malformed JSON.

        Example:
            >>> async with WeatherXuClient("your-api-key") as client:
            ...     history = await client.get_historical(
            ...         40.7128, -74.0060, start=1704880800, end=1704970800
            ...     )
            ...     for hour in history.data.hourly.data:
            ...         print(hour.forecast_start, hour.temperature)
        """
        with _wrap_errors("historical"):
            request = HistoricalRequest(
                lat=lat, lon=lon, start=start, end=end, units=units
            )
            logger.debug(f"Fetching historical data for ({lat}, {lon}) [{start}, {end}]")
            return await self._fetch(
                HISTORICAL_API_URL,
                request.to_params(self._config.units),
                _HISTORICAL_ENVELOPE,
                "historical",
            )
