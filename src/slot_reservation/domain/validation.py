"""Calendar and business-hours rules for appointment slots."""

import re
from typing import List

# Business hours, inclusive. The last slot starts at CLOSING_HOUR.
OPENING_HOUR = 9
CLOSING_HOUR = 16

MIN_YEAR = 1900
MAX_YEAR = 2100

_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_TIME_PATTERN = re.compile(r"([01]\d|2[0-3]):([0-5]\d)", re.ASCII)

_DAYS_IN_MONTH = {
    1: 31,
    2: 28,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the Gregorian calendar."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Get the number of days in a month, accounting for leap years."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def is_valid_date(value: object) -> bool:
    """
    Validate a date string in strict YYYY-MM-DD form.

    The check is structural first (exact digit counts and separators) and
    then calendrical: the year must lie in [1900, 2100], the month in [1, 12]
    and the day must exist in that month of that year.
    """
    if not isinstance(value, str):
        return False

    match = _DATE_PATTERN.fullmatch(value)
    if not match:
        return False

    year, month, day = (int(part) for part in match.groups())

    if year < MIN_YEAR or year > MAX_YEAR:
        return False

    if month < 1 or month > 12:
        return False

    return 1 <= day <= days_in_month(year, month)


def is_valid_time_slot(value: object) -> bool:
    """Validate an HH:MM time string that starts a business-hours slot."""
    if not isinstance(value, str):
        return False

    match = _TIME_PATTERN.fullmatch(value)
    if not match:
        return False

    hour, minute = (int(part) for part in match.groups())

    # Slots only start on the hour
    if minute != 0:
        return False

    return OPENING_HOUR <= hour <= CLOSING_HOUR


def generate_all_slots() -> List[str]:
    """Generate every bookable slot of a day, in ascending order."""
    return [f"{hour:02d}:00" for hour in range(OPENING_HOUR, CLOSING_HOUR + 1)]
