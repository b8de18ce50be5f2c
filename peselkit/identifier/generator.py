"""Random identifier generation."""

from __future__ import annotations

import random
from datetime import date
from typing import Any

from .codec import MAX_YEAR, MIN_YEAR, encode
from .dates import days_in_month


def _in_bounds(year: int | str | None) -> int | None:
    if year is None:
        return None
    try:
        value = int(year)
    except (TypeError, ValueError):
        return None
    return value if MIN_YEAR <= value <= MAX_YEAR else None


def resolve_year_bounds(
    from_year: int | str | None = None,
    to_year: int | str | None = None,
    today: date | None = None,
) -> tuple[int, int]:
    """Clamp a requested year range into the supported window.

    An unusable ``from_year`` falls back to 1800. An unusable ``to_year``
    (out of range or before ``from_year``) falls back to the current year,
    or to 2299 if the current year is before ``from_year``.
    """
    start = _in_bounds(from_year)
    if start is None:
        start = MIN_YEAR

    end = _in_bounds(to_year)
    if end is None or end < start:
        current = (today or date.today()).year
        end = MAX_YEAR if current < start else current
    return start, end


def random_identifier(
    from_year: int | str | None = None,
    to_year: int | str | None = None,
    *,
    rng: Any = None,
    seed: int | None = None,
    today: date | None = None,
) -> str:
    """Draw a random identifier born between two years.

    The day is always the last day of the drawn month.

    Args:
        from_year: Earliest birth year (default 1800)
        to_year: Latest birth year (default current year)
        rng: Anything with ``randint(a, b)``; defaults to the ``random`` module
        seed: Build a private ``random.Random(seed)`` when no ``rng`` is given
        today: Reference date for the "current year" fallback
    """
    if rng is None:
        rng = random.Random(seed) if seed is not None else random

    start, end = resolve_year_bounds(from_year, to_year, today)
    year = rng.randint(start, end)
    month = rng.randint(1, 12)
    day = days_in_month(year, month)
    serial = rng.randint(0, 9999)
    return encode(year, month, day, serial)


class RandomIdentifierGenerator:
    """Draws identifiers from a single random source.

    Unlike the module function, an instance keeps its RNG between draws, so
    a seeded generator yields a reproducible sequence.
    """

    def __init__(self, rng: Any = None, seed: int | None = None):
        if rng is None:
            rng = random.Random(seed) if seed is not None else random
        self.rng = rng

    def generate(
        self,
        from_year: int | str | None = None,
        to_year: int | str | None = None,
        *,
        today: date | None = None,
    ) -> str:
        return random_identifier(from_year, to_year, rng=self.rng, today=today)
