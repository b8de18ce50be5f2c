"""Exhaustive enumeration of identifier seeds over a date range.

Order is date-major, then the 3-digit counter ascending, then the gender
digit ascending. Nothing is materialized up front: a full year with either
gender is 3.65 million entries.
"""

import logging
from collections.abc import Iterator
from datetime import date, timedelta

from ..core.models import GenderFilter, RangeEntry
from .codec import MAX_YEAR, MIN_YEAR, encode
from .combinatorics import COUNTERS_PER_DAY, count_combinations
from .dates import as_date
from .errors import InvalidInput

logger = logging.getLogger(__name__)


class IdentifierRange:
    """Re-iterable, sized sequence of ``RangeEntry`` for a date range."""

    def __init__(
        self,
        from_date: date | str | tuple,
        to_date: date | str | tuple,
        gender_filter: GenderFilter | str | None = GenderFilter.EITHER,
    ):
        self.from_date = as_date(from_date)
        self.to_date = as_date(to_date)
        self.gender_filter = GenderFilter.parse(gender_filter)

        for label, value in (("from", self.from_date), ("to", self.to_date)):
            if value.year < MIN_YEAR or value.year > MAX_YEAR:
                raise InvalidInput(
                    f"Range {label} year {value.year} outside {MIN_YEAR}-{MAX_YEAR}",
                    field="year",
                )

    def __len__(self) -> int:
        return count_combinations(
            self.from_date, self.to_date, self.gender_filter.gender_known
        )

    def __iter__(self) -> Iterator[RangeEntry]:
        digits = self.gender_filter.digits
        day = self.from_date
        while day <= self.to_date:
            for counter in range(COUNTERS_PER_DAY):
                prefix = f"{counter:03d}"
                for digit in digits:
                    yield RangeEntry(day.year, day.month, day.day, prefix + digit)
            day += timedelta(days=1)

    def __repr__(self) -> str:
        return (
            f"IdentifierRange({self.from_date.isoformat()!r}, "
            f"{self.to_date.isoformat()!r}, {self.gender_filter.value!r})"
        )


def enumerate_range(
    from_date: date | str | tuple,
    to_date: date | str | tuple,
    gender_filter: GenderFilter | str | None = GenderFilter.EITHER,
) -> IdentifierRange:
    """Lazily enumerate every (year, month, day, serial) in the range."""
    result = IdentifierRange(from_date, to_date, gender_filter)
    logger.debug("Enumerating %s (%d entries)", result, len(result))
    return result


def generate_identifiers(
    from_date: date | str | tuple,
    to_date: date | str | tuple,
    gender_filter: GenderFilter | str | None = GenderFilter.EITHER,
    prefix: str = "",
    suffix: str = "",
) -> Iterator[str]:
    """Lazily produce full identifiers for a range, wrapped in prefix/suffix.

    Handy for building wordlists. Range errors are raised immediately, not
    on first iteration.
    """
    entries = enumerate_range(from_date, to_date, gender_filter)
    return (prefix + encode(*entry) + suffix for entry in entries)


class RangeGenerator:
    """Stateless facade over range enumeration."""

    enumerate = staticmethod(enumerate_range)
    identifiers = staticmethod(generate_identifiers)
