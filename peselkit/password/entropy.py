"""Theoretical password entropy from character-class counts."""

import math

# Alphabet size contributed by each class when present. The special class is
# deliberately 26 here, not the 11/33 used by the scorer.
POOL_SIZES = (26, 26, 10, 26)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def entropy_bits(length: int, pool_size: int) -> int:
    """``round(length * log2(pool_size))``, 0 for an empty pool."""
    if pool_size <= 0 or length <= 0:
        return 0
    return round_half_up(length * math.log2(pool_size))


def _count(value: int | str | None) -> int:
    if value is None or value == "":
        return 0
    return int(value)


def estimate_entropy(
    lower: int | str | None = 0,
    upper: int | str | None = 0,
    digits: int | str | None = 0,
    special: int | str | None = 0,
) -> int:
    """Entropy in bits of a password with the given class counts.

    Missing counts are treated as 0.

    Example:
        estimate_entropy(8) -> 38  # 8 * log2(26)
    """
    counts = [_count(lower), _count(upper), _count(digits), _count(special)]
    pool_size = sum(size for size, n in zip(POOL_SIZES, counts) if n > 0)
    return entropy_bits(sum(counts), pool_size)


class EntropyEstimator:
    """Stateless facade for count-based entropy estimates."""

    pool_sizes = POOL_SIZES

    estimate = staticmethod(estimate_entropy)
