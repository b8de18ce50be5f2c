"""PESEL identifier codec, combinatorics and generators."""

from .errors import IdentifierError, InvalidInput, InvalidDate, InvalidFormat
from .dates import is_leap_year, is_valid_date, days_in_month, as_date, DateValidator
from .checksum import checksum, is_valid_checksum, CHECKSUM_WEIGHTS, ChecksumCalculator
from .codec import (
    encode,
    decode,
    validate,
    gender_of,
    inspect_identifier,
    IdentifierCodec,
    CENTURY_OFFSETS,
    MIN_YEAR,
    MAX_YEAR,
)
from .combinatorics import count_combinations, CombinatoricsCounter
from .ranges import (
    enumerate_range,
    generate_identifiers,
    IdentifierRange,
    RangeGenerator,
)
from .generator import (
    random_identifier,
    resolve_year_bounds,
    RandomIdentifierGenerator,
)

__all__ = [
    # Errors
    "IdentifierError",
    "InvalidInput",
    "InvalidDate",
    "InvalidFormat",
    # Dates
    "is_leap_year",
    "is_valid_date",
    "days_in_month",
    "as_date",
    "DateValidator",
    # Checksum
    "checksum",
    "is_valid_checksum",
    "CHECKSUM_WEIGHTS",
    "ChecksumCalculator",
    # Codec
    "encode",
    "decode",
    "validate",
    "gender_of",
    "inspect_identifier",
    "IdentifierCodec",
    "CENTURY_OFFSETS",
    "MIN_YEAR",
    "MAX_YEAR",
    # Ranges
    "count_combinations",
    "CombinatoricsCounter",
    "enumerate_range",
    "generate_identifiers",
    "IdentifierRange",
    "RangeGenerator",
    "random_identifier",
    "resolve_year_bounds",
    "RandomIdentifierGenerator",
]
