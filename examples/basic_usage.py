"""Basic usage examples for WeatherXu client."""

import asyncio
import os

from weatherxu import Part, Units, WeatherXuClient, WeatherXuError

API_KEY = os.environ.get("WEATHERXU_API_KEY", "")


async def forecast_example() -> None:
    """Get current conditions and daily forecast."""
    async with WeatherXuClient(API_KEY) as client:
        forecast = await client.get_weather(
            lat=40.7128,
            lon=-74.0060,
            parts=[Part.ALERTS, Part.CURRENTLY, Part.DAILY],
        )

        data = forecast.data
        print("=== Current Weather ===")
        print(f"Location: {data.latitude}, {data.longitude} ({data.timezone})")
        print(f"Temperature: {data.currently.temperature}°C")
        print(f"Feels like: {data.currently.apparent_temperature}°C")
        print(f"Wind: {data.currently.wind_speed} m/s")

        for alert in data.alerts or []:
            print(f"ALERT: {alert.title}")

        print("\n=== Daily Forecast ===")
        for day in data.daily.data:
            print(f"{day.forecast_start}: {day.temperature_min}°C - {day.temperature_max}°C")


async def historical_example() -> None:
    """Get historical hourly data in imperial units."""
    async with WeatherXuClient(API_KEY, units=Units.IMPERIAL) as client:
        history = await client.get_historical(
            lat=40.7128,
            lon=-74.0060,
            start=1704880800,
            end=1704970800,
        )

        print("\n=== Historical Data ===")
        print(f"Data points: {len(history.data.hourly.data)}")
        for hour in history.data.hourly.data[:5]:
            print(f"{hour.forecast_start}: {hour.temperature}°F, {hour.icon}")


async def dataframe_example() -> None:
    """Convert to pandas DataFrame."""
    from weatherxu.dataframe import to_dataframe

    async with WeatherXuClient(API_KEY) as client:
        forecast = await client.get_weather(40.7128, -74.0060, parts=[Part.HOURLY])

        try:
            df = to_dataframe(forecast)
        except ImportError as e:
            print(f"\n=== DataFrame Example ===\n{e}")
            return

        print("\n=== DataFrame Example ===")
        print(f"Shape: {df.shape}")
        print(df[["forecast_start", "temperature", "precip_probability"]].head())


async def main() -> None:
    """Run all examples."""
    try:
        await forecast_example()
        await historical_example()
        await dataframe_example()
    except WeatherXuError as e:
        print(f"Request failed: {e.message} (status={e.status}, code={e.code})")


if __name__ == "__main__":
    asyncio.run(main())
