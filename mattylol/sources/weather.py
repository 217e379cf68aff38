"""External conditions from Open-Meteo."""
import math
from typing import Any, Optional, Tuple

from ..proxy import (
    CachePolicy,
    Endpoint,
    ProxyRequest,
    ProxyResponse,
    ProxyRoute,
    Success,
    Unconfigured,
)

GEOCODING_API = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_API = "https://api.open-meteo.com/v1/forecast"

Coordinates = Tuple[float, float]


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def conditions_message(data: Any) -> str:
    """Summarise the "current" block of a forecast response."""
    current = data.get("current") if isinstance(data, dict) else None
    if not isinstance(current, dict):
        current = {}

    temp = _number(current.get("temperature_2m"))
    feels = _number(current.get("apparent_temperature"))
    wind = _number(current.get("wind_speed_10m"))

    parts = []
    if temp is not None:
        parts.append(f"{round_half_up(temp)}°F")
    if feels is not None:
        parts.append(f"feels {round_half_up(feels)}°F")
    if wind is not None:
        parts.append(f"wind {round_half_up(wind)}mph")

    if not parts:
        return "external conditions: unavailable"
    return f"external conditions: {' | '.join(parts)}"


class WeatherStatusRoute(ProxyRoute):
    """
    GET /api/status/weather

    Uses WEATHER_LAT/WEATHER_LON when both are set, otherwise geocodes the
    configured place name. Geocoding is best effort; if no coordinates can
    be found the route degrades like any unconfigured status source.
    """

    name = "weather"
    path = "/api/status/weather"
    optional = True
    success_cache = CachePolicy(120, 1800)

    def resolve_config(self) -> Coordinates:
        lat, lon = self.settings.weather_lat, self.settings.weather_lon
        if lat is not None and lon is not None:
            return lat, lon

        coords = self.geocode(self.settings.weather_place)
        if coords is None:
            raise Unconfigured(self.name, "WEATHER_LAT/WEATHER_LON")
        return coords

    def geocode(self, place: str) -> Optional[Coordinates]:
        result = self.fetcher.fetch(
            Endpoint(
                url=GEOCODING_API,
                params={"name": place, "count": "1", "language": "en", "format": "json"},
            )
        )
        if not isinstance(result, Success):
            self.logger.warning(f"Geocoding {place!r} failed: {result}")
            return None

        results = result.body.get("results") if isinstance(result.body, dict) else None
        first = results[0] if isinstance(results, list) and results else None
        if not isinstance(first, dict):
            return None

        lat, lon = _number(first.get("latitude")), _number(first.get("longitude"))
        if lat is None or lon is None:
            return None
        return lat, lon

    def unconfigured(self, error: Unconfigured) -> ProxyResponse:
        self.logger.info("No coordinates available")
        return ProxyResponse(
            200, {"ok": False, "message": "external conditions: weather unavailable"}
        ).with_cache(self.fallback_cache)

    def endpoint(self, coords: Coordinates, request: ProxyRequest) -> Endpoint:
        lat, lon = coords
        return Endpoint(
            url=FORECAST_API,
            params={
                "latitude": str(lat),
                "longitude": str(lon),
                "current": "temperature_2m,apparent_temperature,weather_code,wind_speed_10m",
                "temperature_unit": "fahrenheit",
                "wind_speed_unit": "mph",
            },
        )

    def normalize(self, coords: Coordinates, body: Any) -> ProxyResponse:
        return ProxyResponse(200, {"ok": True, "message": conditions_message(body)})
