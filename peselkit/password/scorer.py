"""Password strength scoring against four character classes.

Computes charset usage, entropy, the number of possible variations, a
strength percentage, a complexity score, and four penalty flags:

- construction: letters + 1-3 digits, Capitalized word, letters + 1 symbol
- repeats: number of overlapping runs of three identical characters
- blacklisted: exact match in a caller-supplied word list
- length: shorter than 8 characters
"""

import logging
import re
from collections.abc import Collection, Iterable
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from ..core.models import CharsetUsage, PasswordMetrics
from .charsets import SymbolSet, charsets_for
from .entropy import entropy_bits

logger = logging.getLogger(__name__)

MIN_LENGTH = 8

_WEAK_CONSTRUCTIONS = (
    re.compile(r"^[a-zA-Z]+[0-9]{1,3}$"),
    re.compile(r"^[A-Z][a-z]+$"),
    re.compile(r"^[a-zA-Z]+[^a-zA-Z0-9]$"),
)


def penalize_construction(password: str) -> int:
    return 1 if any(p.match(password) for p in _WEAK_CONSTRUCTIONS) else 0


def penalize_repeats(password: str) -> int:
    """Count positions starting a run of three identical characters."""
    return sum(
        1
        for i in range(len(password) - 2)
        if password[i] == password[i + 1] == password[i + 2]
    )


def _percent(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    ratio = Decimal(part) / Decimal(whole) * 100
    return float(ratio.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def score_password(
    password: str | None,
    use_common_symbols: bool | SymbolSet | None = False,
    blacklist: Collection[str] | None = None,
) -> PasswordMetrics | None:
    """Score a password.

    Args:
        password: Password to score
        use_common_symbols: Restrict the symbols class to ``!@#$%^&*-_|``
            (or pass a ``SymbolSet`` directly)
        blacklist: Passwords that earn the blacklist penalty

    Returns:
        PasswordMetrics, or None for an empty/missing password.
    """
    if not password:
        return None

    charsets = charsets_for(use_common_symbols)
    usage = {
        cs.name: CharsetUsage(count=cs.count(password), length=cs.length)
        for cs in charsets
    }

    length = len(password)
    total_size = sum(cs.length for cs in charsets)
    used_size = sum(u.length for u in usage.values() if u.count > 0)
    bits = entropy_bits(length, used_size)

    metrics = PasswordMetrics(
        password=password,
        password_length=length,
        charsets=usage,
        total_alphabet_size=total_size,
        used_alphabet_size=used_size,
        entropy_bits=bits,
        entropy_pow=2**bits,
        variations=used_size**length if used_size else 0,
        strength_percent=_percent(used_size, total_size),
        complexity=sum(u.count * u.length for u in usage.values()),
        penalize_construction=penalize_construction(password),
        penalize_repeats=penalize_repeats(password),
        penalize_blacklisted=1 if blacklist and password in blacklist else 0,
        penalize_length=1 if length < MIN_LENGTH else 0,
    )
    logger.debug(
        "Scored password of length %d: entropy=%d bits, strength=%.2f%%",
        length,
        bits,
        metrics.strength_percent,
    )
    return metrics


def parse_blacklist(lines: Iterable[str]) -> frozenset[str]:
    """Build a blacklist from lines, skipping blanks and ``#`` comments."""
    words = set()
    for line in lines:
        word = line.strip()
        if word and not word.startswith("#"):
            words.add(word)
    return frozenset(words)


def load_blacklist(path: str | Path) -> frozenset[str]:
    """Read a newline-delimited password blacklist file.

    Bytes that are not valid UTF-8 decode to U+FFFD.
    """
    path = Path(path)
    with open(path, encoding="utf-8", errors="replace") as f:
        words = parse_blacklist(f)
    logger.debug("Loaded %d blacklisted passwords from %s", len(words), path)
    return words


class PasswordStrengthScorer:
    """Stateless facade over password scoring and blacklist loading."""

    min_length = MIN_LENGTH

    score = staticmethod(score_password)
    load_blacklist = staticmethod(load_blacklist)
