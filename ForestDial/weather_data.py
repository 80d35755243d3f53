"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class WeatherIcon(Enum):
    """Display icons; the value is the asset filename stem."""
    SUN = "Sun"
    RAIN = "Rain"
    SNOW = "Snow"
    STORM = "Storm"
    WIND_SPRING = "WindSpring"
    WIND_FALL = "WindFall"

    @property
    def filename(self) -> str:
        return f"{self.value}.png"


class MockCondition(Enum):
    """Locally generated stand-in conditions used when the live fetch fails."""
    CLEAR = "clear"
    CLOUDS = "clouds"
    RAIN = "rain"
    DRIZZLE = "drizzle"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    MIST = "mist"
    FOG = "fog"


@dataclass(frozen=True)
class Coded:
    """A numeric weather code as reported by the remote service (WMO 0-99)."""
    code: int


@dataclass(frozen=True)
class Mock:
    """A symbolic condition from the mock generator."""
    condition: MockCondition


WeatherCode = Union[Coded, Mock]


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of one live fetch attempt.

    Exactly one of `weather` and `error` is set.
    """
    weather: Optional[Coded] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, weather: Coded) -> "FetchResult":
        return cls(weather=weather)

    @classmethod
    def failure(cls, error: str) -> "FetchResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.weather is not None
