"""Exceptions for the WeatherXu API client.

Every failure surfaced by the client is a WeatherXuError. Subclasses tell
apart where the failure came from; the populated fields tell the same
story for callers that only catch the base class:

    - configuration error: only ``message``
    - HTTP error: ``message`` and ``status`` (HTTP status code)
    - API error: ``message`` and ``code`` (provider error code)
    - anything else: ``message`` only, with the original exception chained

Example:
    Catching all WeatherXu errors::

        from weatherxu import WeatherXuClient, WeatherXuError

        try:
            async with WeatherXuClient(api_key) as client:
                data = await client.get_weather(40.7128, -74.0060)
        except WeatherXuError as e:
            print(f"WeatherXu error: {e} (status={e.status}, code={e.code})")
"""

from typing import Optional


class WeatherXuError(Exception):
    """Base exception for all WeatherXu errors.

    Args:
        message: Human-readable description of the failure.
        status: HTTP status code, when the failure came from an HTTP response.
        code: Provider-defined error code from a ``success: false`` body.

    Attributes:
        message: Human-readable description of the failure.
        status: HTTP status code or None.
        code: Provider error code or None.

    Example:
        >>> err = WeatherXuError("bad key", code="401")
        >>> err.status is None, err.code
        (True, '401')
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status = status
        self.code = code
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status={self.status!r}, code={self.code!r})"
        )


class WeatherXuConfigError(WeatherXuError):
    """Exception raised when the client is constructed with invalid settings.

    Raised synchronously from the constructor, before any network activity.

    Example:
        >>> WeatherXuClient("")
        Traceback (most recent call last):
        ...
        WeatherXuConfigError: API key is required
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class WeatherXuHTTPError(WeatherXuError):
    """Exception raised when the API answers with a non-2xx status.

    ``status`` always carries the HTTP status code.
    """

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message, status=status)


class WeatherXuConnectionError(WeatherXuError):
    """Exception raised when the request never got an HTTP response.

    Covers DNS failures, refused connections and timeouts. Wraps the
    underlying httpx exception, available as ``__cause__``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class WeatherXuAPIError(WeatherXuError):
    """Exception raised when a 2xx body reports ``success: false``.

    The provider's status code is reported in ``code``; ``status`` stays
    None since the HTTP exchange itself succeeded.

    Example:
        >>> raise WeatherXuAPIError("bad key", code="401")
        Traceback (most recent call last):
        ...
        WeatherXuAPIError: bad key
    """

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message, code=code)
