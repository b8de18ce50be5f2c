"""Size of the identifier space over a date range."""

from datetime import date

from .dates import as_date

# Three free serial digits per day
COUNTERS_PER_DAY = 1000


def count_combinations(
    from_date: date | str | tuple, to_date: date | str | tuple, gender_known: bool
) -> int:
    """Count distinct identifiers born between two dates (inclusive).

    The last serial digit carries gender, so it contributes 5 values when the
    gender is known and 10 otherwise. A reversed range counts as empty.
    """
    days = 1 + (as_date(to_date) - as_date(from_date)).days
    if days <= 0:
        return 0
    return days * COUNTERS_PER_DAY * (5 if gender_known else 10)


class CombinatoricsCounter:
    """Stateless facade for sizing a date range."""

    count = staticmethod(count_combinations)
