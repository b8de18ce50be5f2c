"""peselkit: PESEL identifier codec and password strength scoring.

Usage:
    from peselkit import encode, decode, validate, score_password

    pesel = encode(1990, 5, 17, 1234)
    decode(pesel)            # BirthDate(year=1990, month=5, day=17)
    score_password("hunter2").entropy_bits
"""

__version__ = "0.1.0"

from .identifier import (
    IdentifierError,
    InvalidInput,
    InvalidDate,
    InvalidFormat,
    IdentifierCodec,
    encode,
    decode,
    validate,
    checksum,
    is_valid_checksum,
    is_valid_date,
    gender_of,
    inspect_identifier,
    count_combinations,
    enumerate_range,
    generate_identifiers,
    random_identifier,
)
from .password import (
    SymbolSet,
    score_password,
    estimate_entropy,
    load_blacklist,
)
from .core.models import (
    BirthDate,
    Gender,
    GenderFilter,
    RangeEntry,
    IdentifierReport,
    CharsetUsage,
    PasswordMetrics,
)

__all__ = [
    "__version__",
    # Errors
    "IdentifierError",
    "InvalidInput",
    "InvalidDate",
    "InvalidFormat",
    # Identifier
    "IdentifierCodec",
    "encode",
    "decode",
    "validate",
    "checksum",
    "is_valid_checksum",
    "is_valid_date",
    "gender_of",
    "inspect_identifier",
    "count_combinations",
    "enumerate_range",
    "generate_identifiers",
    "random_identifier",
    # Password
    "SymbolSet",
    "score_password",
    "estimate_entropy",
    "load_blacklist",
    # Models
    "BirthDate",
    "Gender",
    "GenderFilter",
    "RangeEntry",
    "IdentifierReport",
    "CharsetUsage",
    "PasswordMetrics",
]
