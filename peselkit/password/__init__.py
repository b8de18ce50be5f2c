"""Password strength scoring and entropy estimation."""

from .charsets import Charset, SymbolSet, charsets_for
from .entropy import estimate_entropy, entropy_bits, EntropyEstimator
from .scorer import (
    score_password,
    penalize_construction,
    penalize_repeats,
    parse_blacklist,
    load_blacklist,
    MIN_LENGTH,
    PasswordStrengthScorer,
)

__all__ = [
    "Charset",
    "SymbolSet",
    "charsets_for",
    "estimate_entropy",
    "entropy_bits",
    "EntropyEstimator",
    "score_password",
    "penalize_construction",
    "penalize_repeats",
    "parse_blacklist",
    "load_blacklist",
    "MIN_LENGTH",
    "PasswordStrengthScorer",
]
