"""Birth date plausibility checks."""

from datetime import date
from typing import Optional

# Earliest birth year accepted as plausible
MIN_BIRTH_YEAR = 1800


def parse_birth_code(birth_code: str) -> Optional[date]:
    """Parse an 8-digit YYYYMMDD code into a date.

    Returns:
        The calendar date, or None if the code is not a real date.
    """
    if len(birth_code) != 8 or not all("0" <= c <= "9" for c in birth_code):
        return None
    # Fixed slices; strptime would read "19901311" as 1990-01-31
    try:
        return date(int(birth_code[0:4]), int(birth_code[4:6]), int(birth_code[6:8]))
    except ValueError:
        return None


def is_valid_birthday(birth_code: str, today: Optional[date] = None) -> bool:
    """Check that a birth code is a real date between 1800 and today.

    Args:
        birth_code: 8-digit YYYYMMDD code.
        today: Reference date, defaults to the current local date.

    Returns:
        True if the date exists in the calendar, is not before
        MIN_BIRTH_YEAR and not after today.

    Examples:
        >>> is_valid_birthday("20000229")
        True
        >>> is_valid_birthday("19000229")
        False
    """
    birthday = parse_birth_code(birth_code)
    if birthday is None:
        return False

    if birthday.year < MIN_BIRTH_YEAR:
        return False

    if today is None:
        today = date.today()
    return birthday <= today
