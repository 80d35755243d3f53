"""Weather icon selection - pure functions for testability."""
from season import Season
from weather_data import Coded, Mock, MockCondition, WeatherCode, WeatherIcon

# Ordered, non-overlapping code ranges; first match wins.
# None marks the season-dependent wind rule.
_CODE_RANGES = (
    (range(0, 2), WeatherIcon.SUN),          # clear / mainly clear
    (range(2, 4), None),                     # partly cloudy / overcast
    ((45, 46, 48), None),                    # fog variants
    (range(51, 68), WeatherIcon.RAIN),       # drizzle, rain, freezing rain
    (range(71, 78), WeatherIcon.SNOW),       # snow fall
    (range(80, 83), WeatherIcon.RAIN),       # rain showers
    (range(85, 87), WeatherIcon.SNOW),       # snow showers
    (range(95, 100), WeatherIcon.STORM),     # thunderstorm
)

_CONDITION_ICONS = {
    MockCondition.CLEAR: WeatherIcon.SUN,
    MockCondition.RAIN: WeatherIcon.RAIN,
    MockCondition.DRIZZLE: WeatherIcon.RAIN,
    MockCondition.SNOW: WeatherIcon.SNOW,
    MockCondition.THUNDERSTORM: WeatherIcon.STORM,
    MockCondition.CLOUDS: None,
    MockCondition.MIST: None,
    MockCondition.FOG: None,
}


def wind_icon(season: Season) -> WeatherIcon:
    """
    Icon for cloudy, misty or foggy weather.

    Spring and fall get their own wind art; summer and winter show the sun.
    """
    if season is Season.SPRING:
        return WeatherIcon.WIND_SPRING
    if season is Season.FALL:
        return WeatherIcon.WIND_FALL
    return WeatherIcon.SUN


def icon_for_code(code: int, season: Season) -> WeatherIcon:
    """Map a numeric WMO weather code to an icon; unknown codes show the sun."""
    for codes, icon in _CODE_RANGES:
        if code in codes:
            return icon if icon is not None else wind_icon(season)
    return WeatherIcon.SUN


def icon_for_condition(condition: MockCondition, season: Season) -> WeatherIcon:
    """Map a mock condition to an icon."""
    icon = _CONDITION_ICONS.get(condition, WeatherIcon.SUN)
    return icon if icon is not None else wind_icon(season)


def classify_icon(weather: WeatherCode, season: Season, snow_icon: bool = True) -> WeatherIcon:
    """
    Select the display icon for a weather reading in a given season.

    Args:
        weather: Coded value from the remote service or Mock condition
        season: Current season, used for the wind icons
        snow_icon: When False, snow collapses to the rain icon

    Returns:
        WeatherIcon: Exactly one icon
    """
    if isinstance(weather, Coded):
        icon = icon_for_code(weather.code, season)
    elif isinstance(weather, Mock):
        icon = icon_for_condition(weather.condition, season)
    else:
        raise TypeError(f"Expected Coded or Mock, got {type(weather).__name__}")

    if icon is WeatherIcon.SNOW and not snow_icon:
        return WeatherIcon.RAIN
    return icon


def icon_filename(icon: WeatherIcon) -> str:
    """Asset filename for an icon, e.g. "Storm.png"."""
    return icon.filename
