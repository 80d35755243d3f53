"""Open-Meteo current conditions provider implementation."""
import logging
import requests
from typing import Optional
from weather_provider import WeatherProviderBase, WeatherProviderError, coerce_weather_code
from weather_data import Coded

# Fixed location of the page's "forest".
DEFAULT_LATITUDE = 40.7128
DEFAULT_LONGITUDE = -74.0060


class OpenMeteoProvider(WeatherProviderBase):
    """
    Weather provider using the Open-Meteo forecast API.

    Open-Meteo needs no API key and reports WMO weather interpretation
    codes (0-99): https://open-meteo.com/en/docs
    """

    name = "Open-Meteo"

    BASE_URL = "https://api.open-meteo.com/v1/forecast"

    def __init__(
        self,
        lat: float = DEFAULT_LATITUDE,
        lon: float = DEFAULT_LONGITUDE,
        timeout: int = 10,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize Open-Meteo provider.

        Args:
            lat: Latitude (-90 to 90)
            lon: Longitude (-180 to 180)
            timeout: HTTP request timeout in seconds
            session: Optional requests session; module-level requests is used otherwise
        """
        self.lat = lat
        self.lon = lon
        self.timeout = timeout
        self.session = session

    def fetch_weather_code(self) -> Coded:
        """
        Fetch the current weather code.

        Returns:
            Coded: Current WMO weather code

        Raises:
            WeatherProviderError: On network errors, non-2xx responses,
                unparseable bodies or a missing code field
        """
        params = {
            "latitude": self.lat,
            "longitude": self.lon,
            "current": "weather_code",
        }
        http = self.session or requests

        try:
            logging.debug(f"Requesting Open-Meteo current conditions for lat={self.lat}, lon={self.lon}")
            response = http.get(self.BASE_URL, params=params, timeout=self.timeout)
            logging.debug(f"Open-Meteo response status: {response.status_code}")
        except requests.exceptions.RequestException as e:
            raise WeatherProviderError(f"Network error: {str(e)}") from e

        if not response.ok:
            raise WeatherProviderError(f"HTTP {response.status_code}: {response.text[:200]}")

        try:
            data = response.json()
        except ValueError as e:
            # requests raises its JSONDecodeError, a ValueError subclass
            raise WeatherProviderError(f"Failed to parse response: {str(e)}") from e

        code = extract_weather_code(data)
        logging.debug(f"Open-Meteo weather code: {code}")
        return Coded(code)


def extract_weather_code(data) -> int:
    """
    Pull the numeric weather code out of an Open-Meteo response body.

    Accepts both the `current.weather_code` shape and the older
    `current_weather.weathercode` shape.

    Raises:
        WeatherProviderError: If no integer code is present
    """
    if not isinstance(data, dict):
        raise WeatherProviderError("Response body is not a JSON object")

    code = None
    current = data.get("current")
    if isinstance(current, dict):
        code = current.get("weather_code")
    if code is None:
        legacy = data.get("current_weather")
        if isinstance(legacy, dict):
            code = legacy.get("weathercode")

    if code is None:
        raise WeatherProviderError("Response missing weather code")
    return coerce_weather_code(code).code
