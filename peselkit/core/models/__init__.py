"""All value models for peselkit, organized by domain.

- identifier.py: decoded dates, gender markers, range entries, reports
- password.py: password strength metrics
"""

from .identifier import (
    Gender,
    GenderFilter,
    BirthDate,
    RangeEntry,
    IdentifierReport,
)
from .password import (
    CharsetUsage,
    PasswordMetrics,
)

__all__ = [
    # Identifier
    "Gender",
    "GenderFilter",
    "BirthDate",
    "RangeEntry",
    "IdentifierReport",
    # Password
    "CharsetUsage",
    "PasswordMetrics",
]
