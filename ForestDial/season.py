"""Calendar season classification (Northern Hemisphere)."""
from enum import Enum


class InvalidInputError(ValueError):
    """Raised when a month or hour is outside its valid range."""
    pass


class Season(Enum):
    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"
    WINTER = "Winter"


_MONTH_TO_SEASON = {
    3: Season.SPRING, 4: Season.SPRING, 5: Season.SPRING,
    6: Season.SUMMER, 7: Season.SUMMER, 8: Season.SUMMER,
    9: Season.FALL, 10: Season.FALL, 11: Season.FALL,
    12: Season.WINTER, 1: Season.WINTER, 2: Season.WINTER,
}


def validate_month(month: int) -> int:
    # bool is an int subclass, but True is not a month
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidInputError(f"month must be an integer in 1..12, got {month!r}")
    return month


def validate_hour(hour: int) -> int:
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise InvalidInputError(f"hour must be an integer in 0..23, got {hour!r}")
    return hour


def classify_season(month: int) -> Season:
    """
    Map a calendar month to its season.

    Args:
        month: Month number, 1 (January) to 12 (December)

    Returns:
        Season: Spring for 3-5, Summer for 6-8, Fall for 9-11, Winter otherwise

    Raises:
        InvalidInputError: If month is outside 1..12
    """
    return _MONTH_TO_SEASON[validate_month(month)]


def season_filename(season: Season) -> str:
    """Image filename of the seasonal art, e.g. "Winter.png"."""
    return f"{season.value}.png"
