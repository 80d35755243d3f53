"""Clock and date strings for the time/date display targets."""
from datetime import datetime

WEEKDAY_ABBREVIATIONS = ("Sun.", "Mon.", "Tue.", "Wed.", "Thu.", "Fri.", "Sat.")


def weekday_index(instant: datetime) -> int:
    """Weekday with Sunday as 0 and Saturday as 6."""
    # datetime.weekday() counts from Monday
    return (instant.weekday() + 1) % 7


def format_time(instant: datetime) -> str:
    """
    Format an instant as a 12-hour clock string.

    Hour 0 is shown as 12; minutes are zero-padded.

    Examples:
        21:05 -> "9:05 pm"
        12:00 -> "12:00 pm"
        00:30 -> "12:30 am"
    """
    hour = instant.hour
    suffix = "am" if hour < 12 else "pm"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{instant.minute:02d} {suffix}"


def format_date(instant: datetime) -> str:
    """Format an instant as weekday abbreviation and unpadded day, e.g. "Wed. 14"."""
    return f"{WEEKDAY_ABBREVIATIONS[weekday_index(instant)]} {instant.day}"
