"""
Mock weather generator used when the live weather fetch fails.

This is a placeholder signal, not a forecast: it picks a plausible condition
for the time of day and month so the weather icon is never blank.
"""
import random
from typing import Optional

from season import validate_hour, validate_month
from weather_data import MockCondition

NIGHT_RAIN_PROBABILITY = 0.3
CLOUDS_PROBABILITY = 0.5
# Deep-winter three-way split: snow below the first bound, clouds below the second.
DEEP_WINTER_SNOW_BOUND = 0.4
DEEP_WINTER_CLOUDS_BOUND = 0.7


def is_night(hour: int) -> bool:
    """18:00 through 06:59 counts as night."""
    return hour >= 18 or hour <= 6


def generate_mock_condition(
    month: int,
    hour: int,
    rng: Optional[random.Random] = None,
    snow_variant: bool = True
) -> MockCondition:
    """
    Draw a mock condition for the given month and local hour.

    Args:
        month: Month number 1-12
        hour: Local hour 0-23
        rng: Random source; a fresh unseeded one is used when omitted
        snow_variant: Use the deep-winter snow/clouds/clear split. When False,
            November through February draw clouds/clear only.

    Returns:
        MockCondition: One drawn condition

    Raises:
        InvalidInputError: If month or hour is out of range
    """
    validate_month(month)
    validate_hour(hour)
    if rng is None:
        rng = random.Random()

    if is_night(hour):
        return MockCondition.RAIN if rng.random() < NIGHT_RAIN_PROBABILITY else MockCondition.CLEAR

    if snow_variant:
        if month in (12, 1, 2):
            draw = rng.random()
            if draw < DEEP_WINTER_SNOW_BOUND:
                return MockCondition.SNOW
            if draw < DEEP_WINTER_CLOUDS_BOUND:
                return MockCondition.CLOUDS
            return MockCondition.CLEAR
    elif month >= 11 or month <= 2:
        return MockCondition.CLOUDS if rng.random() < CLOUDS_PROBABILITY else MockCondition.CLEAR

    if 9 <= month <= 11:
        return MockCondition.CLOUDS if rng.random() < CLOUDS_PROBABILITY else MockCondition.CLEAR

    return MockCondition.CLEAR
