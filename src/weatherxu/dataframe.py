"""DataFrame conversion utilities for WeatherXu responses.

This module converts response sections to pandas DataFrames for easier
analysis.

Requirements:
    pandas >= 2.0 must be installed. Install with:
        pip install pandas
    Or install weatherxu with the dataframe extra:
        pip install weatherxu[dataframe]

Functions:
    to_dataframe: Convert a response section to a pandas DataFrame

Example:
    Basic usage::

        import asyncio
        from weatherxu import Part, WeatherXuClient
        from weatherxu.dataframe import to_dataframe

        async def main():
            async with WeatherXuClient("your-api-key") as client:
                forecast = await client.get_weather(
                    40.7128, -74.0060, parts=[Part.HOURLY, Part.DAILY]
                )
                hourly = to_dataframe(forecast)  # hourly is the default part
                daily = to_dataframe(forecast, part=Part.DAILY)
                print(daily[["forecast_start", "temperature_min", "temperature_max"]])

                history = await client.get_historical(
                    40.7128, -74.0060, start=1704880800, end=1704970800
                )
                print(to_dataframe(history).head())

        asyncio.run(main())
"""

from typing import Union

from pydantic import BaseModel
from pydantic.alias_generators import to_snake

from .models import HistoricalResponse, WeatherResponse
from .types import Part

TIMESTAMP_COLUMNS = (
    "forecast_start",
    "forecast_end",
    "sunrise_time",
    "sunset_time",
    "ends_at",
)
"""tuple[str, ...]: Columns holding Unix timestamps, converted to UTC datetimes."""


def _check_pandas() -> None:
    """Check if pandas is installed and raise informative error if not."""
    try:
        import pandas  # noqa: F401
    except ImportError as e:
        raise ImportError(
            "pandas is required for DataFrame conversion. "
            "Install it with: pip install weatherxu[dataframe]"
        ) from e


def _records(response: Union[WeatherResponse, HistoricalResponse], part: Part) -> list[BaseModel]:
    if isinstance(response, HistoricalResponse):
        data = response.data
        if data is None or data.hourly is None:
            return []
        return list(data.hourly.data)

    if isinstance(response, WeatherResponse):
        data = response.data
        if data is None:
            records = None
        elif part == Part.CURRENTLY:
            section = data.currently
            records = [section] if section is not None else None
        elif part == Part.ALERTS:
            records = data.alerts
        else:
            section = getattr(data, part.value)
            records = section.data if section is not None else None

        if records is None:
            raise ValueError(
                f"Response has no '{part.value}' section. "
                f"Request it with parts=[Part.{part.name}]."
            )
        return list(records)

    raise ValueError(
        f"Unsupported response type: {type(response).__name__}. "
        "Expected WeatherResponse or HistoricalResponse."
    )


def to_dataframe(
    response: Union[WeatherResponse, HistoricalResponse],
    part: Union[Part, str] = Part.HOURLY,
) -> "pd.DataFrame":
    """Convert a WeatherXu response section to a pandas DataFrame.

    Args:
        response: Response from ``get_weather`` or ``get_historical``.
        part: Section of a WeatherResponse to convert. Ignored for
            HistoricalResponse, which only has an hourly series.
            Defaults to hourly.

    Returns:
        DataFrame with one row per record (a single row for ``currently``)
        and snake_case column names. Timestamp columns are converted to
        timezone-aware UTC datetimes.

    Raises:
        ImportError: If pandas is not installed.
        ValueError: If the section is absent or the response type is not
            recognized.

    Example:
        >>> df = to_dataframe(forecast, part=Part.DAILY)
        >>> df[["forecast_start", "temperature_max", "sunrise_time"]].head()
    """
    _check_pandas()
    import pandas as pd

    records = _records(response, Part(part))
    df = pd.DataFrame([record.model_dump() for record in records])
    df = df.rename(columns=to_snake)

    for column in TIMESTAMP_COLUMNS:
        if column in df.columns:
            df[column] = pd.to_datetime(df[column], unit="s", utc=True)

    return df


__all__ = ["to_dataframe"]
