"""Weather tools — current conditions and hourly forecast via the Open-Meteo API."""
import logging
from typing import Any, Dict, List

import httpx
from pydantic import BaseModel, Field

from ...config import settings
from ...ui import CardUI, TableUI, TableColumn
from ..registry import register_tool, ToolResult

logger = logging.getLogger(__name__)

# Open-Meteo is free and needs no API key
_FIELDS = "temperature_2m,wind_speed_10m"


class LocationInput(BaseModel):
    location_name: str = Field(description="Name of the location")
    latitude: float = Field(ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(ge=-180, le=180, description="Longitude coordinate")


class ForecastInput(LocationInput):
    hours: int = Field(24, ge=1, le=168, description="Number of hourly entries to return")


class WeatherOutput(BaseModel):
    location_name: str
    time: str
    temperature: float
    wind_speed: float
    units: Dict[str, str]


class HourlyEntry(BaseModel):
    time: str
    temperature: float
    wind_speed: float


class ForecastOutput(BaseModel):
    location_name: str
    hourly: List[HourlyEntry]
    units: Dict[str, str]


async def _fetch_forecast(latitude: float, longitude: float, **params) -> Dict[str, Any]:
    """GET the forecast endpoint for one coordinate pair. HTTP errors propagate."""
    async with httpx.AsyncClient(timeout=settings.weather_timeout_s) as client:
        resp = await client.get(
            settings.weather_base_url,
            params={"latitude": latitude, "longitude": longitude, **params},
        )
        resp.raise_for_status()
        return resp.json()


def _units(units: Dict[str, str]) -> Dict[str, str]:
    return {
        "temperature": units.get("temperature_2m", ""),
        "wind_speed": units.get("wind_speed_10m", ""),
    }


@register_tool(
    "get-weather",
    name="Get Weather",
    description="Fetches current weather for a city",
    input=LocationInput,
    output=WeatherOutput,
    category="weather",
)
async def get_weather(params: LocationInput) -> ToolResult:
    data = await _fetch_forecast(params.latitude, params.longitude, current=_FIELDS)

    current = data.get("current", {})
    units = _units(data.get("current_units", {}))
    temperature = current.get("temperature_2m")
    wind_speed = current.get("wind_speed_10m")

    text = (
        f"The current temperature in {params.location_name} is {temperature}{units['temperature']} "
        f"with wind speed of {wind_speed} {units['wind_speed']}"
    )
    card = CardUI(
        title=f"Current weather in {params.location_name}",
        content=(
            f"Temperature: {temperature}{units['temperature']}\n"
            f"Wind Speed: {wind_speed} {units['wind_speed']}"
        ),
    )
    return ToolResult(
        text=text,
        data={
            "location_name": params.location_name,
            "time": current.get("time", ""),
            "temperature": temperature,
            "wind_speed": wind_speed,
            "units": units,
        },
        ui=card,
    )


@register_tool(
    "get-weather-forecast",
    name="Get Weather Forecast",
    description="Fetches hourly weather forecast",
    input=ForecastInput,
    output=ForecastOutput,
    category="weather",
)
async def get_weather_forecast(params: ForecastInput) -> ToolResult:
    data = await _fetch_forecast(params.latitude, params.longitude, hourly=_FIELDS)

    hourly = data.get("hourly", {})
    units = _units(data.get("hourly_units", {}))
    entries = [
        {"time": t, "temperature": temp, "wind_speed": wind}
        for t, temp, wind in zip(
            hourly.get("time", []),
            hourly.get("temperature_2m", []),
            hourly.get("wind_speed_10m", []),
        )
    ][:params.hours]

    table = TableUI(
        columns=[
            TableColumn(key="time", header="Time", type="text"),
            TableColumn(key="temperature", header=f"Temperature ({units['temperature']})", type="number"),
            TableColumn(key="wind_speed", header=f"Wind Speed ({units['wind_speed']})", type="number"),
        ],
        rows=entries,
    )
    return ToolResult(
        text=f"Weather forecast for {params.location_name}: next {len(entries)} hours",
        data={"location_name": params.location_name, "hourly": entries, "units": units},
        ui=table,
    )
