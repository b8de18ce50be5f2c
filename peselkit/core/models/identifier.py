"""Identifier value types.

Everything here is an immutable value produced and consumed within a single
call: decoded birth dates, gender markers, range entries and the aggregate
inspection report.
"""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"


class GenderFilter(str, Enum):
    """Which serial gender digits a range enumeration should produce."""

    MALE = "M"
    FEMALE = "F"
    EITHER = "A"

    @classmethod
    def parse(cls, value: "GenderFilter | Gender | str | None") -> "GenderFilter":
        """Coerce loose user input into a filter.

        Accepts members of either enum, "M"/"F" in any case, and
        "male"/"female". Anything else means no filtering.
        """
        if isinstance(value, GenderFilter):
            return value
        if isinstance(value, Gender):
            return cls(value.value)
        if isinstance(value, str):
            normalized = value.strip().upper()
            if normalized in ("M", "MALE"):
                return cls.MALE
            if normalized in ("F", "FEMALE"):
                return cls.FEMALE
        return cls.EITHER

    @property
    def gender_known(self) -> bool:
        return self is not GenderFilter.EITHER

    @property
    def digits(self) -> tuple[str, ...]:
        """Serial gender digits for this filter, ascending."""
        if self is GenderFilter.MALE:
            return ("1", "3", "5", "7", "9")
        if self is GenderFilter.FEMALE:
            return ("0", "2", "4", "6", "8")
        return tuple("0123456789")


class BirthDate(NamedTuple):
    """Birth date embedded in an identifier (not necessarily a real date)."""

    year: int
    month: int
    day: int

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


class RangeEntry(NamedTuple):
    """One enumerated identifier seed: date plus 4-digit serial."""

    year: int
    month: int
    day: int
    serial: str  # 3-digit counter followed by the gender digit


class IdentifierReport(BaseModel):
    """Everything that can be said about a single identifier string."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    valid: bool = False
    valid_checksum: bool = False
    checksum: str | None = Field(
        default=None, description="Checksum digit computed from the first 10 digits"
    )
    birth_date: str | None = Field(default=None, description="YYYY-MM-DD")
    gender: Gender | None = None
    error: str | None = Field(
        default=None, description="Validation error message, if any"
    )
