"""Live weather code sources and the error they raise when a fetch fails."""
from abc import ABC, abstractmethod
from weather_data import Coded


class WeatherProviderError(Exception):
    """A live fetch failed: network, HTTP status, body shape or code value."""


class WeatherProviderBase(ABC):
    """
    Source of the current WMO weather code for one fixed location.

    Implementations make exactly one attempt per call and raise
    WeatherProviderError when it fails; WeatherService turns that into a
    mock fallback for the tick.
    """

    name = "weather provider"

    @abstractmethod
    def fetch_weather_code(self) -> Coded:
        ...


def coerce_weather_code(value) -> Coded:
    """
    Validate a raw code value from a response body.

    Integral floats such as 3.0 are accepted, since JSON does not
    distinguish them; booleans, strings, NaN and fractions are not.

    Raises:
        WeatherProviderError: If value is not an integral number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise WeatherProviderError(f"Weather code is not a number: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise WeatherProviderError(f"Weather code is not an integer: {value!r}")
    return Coded(int(value))
