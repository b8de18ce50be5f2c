"""Calendar validity checks.

Only upper bounds are enforced: a day or month below 1 is the caller's
problem. Arguments may be ints or numeric strings.
"""

from datetime import date, datetime

LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})


def is_leap_year(year: int | str) -> bool:
    year = int(year)
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int | str, month: int | str) -> int:
    """Number of days in the given month (30 for any non-long, non-February month)."""
    month = int(month)
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 31 if month in LONG_MONTHS else 30


def is_valid_date(year: int | str, month: int | str, day: int | str) -> bool:
    """Check that ``day`` does not exceed the length of ``month`` in ``year``.

    Returns False (never raises) for non-numeric arguments.
    """
    try:
        return int(day) <= days_in_month(year, month)
    except (TypeError, ValueError):
        return False


def as_date(value: "date | str | tuple | list") -> date:
    """Normalize a date, ISO string, or (year, month, day) sequence to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    year, month, day = value
    return date(int(year), int(month), int(day))


class DateValidator:
    """Stateless facade over the calendar checks."""

    is_leap_year = staticmethod(is_leap_year)
    days_in_month = staticmethod(days_in_month)
    is_valid_date = staticmethod(is_valid_date)
