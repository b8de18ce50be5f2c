"""Encode, decode and validate 11-digit PESEL identifiers.

Layout of an identifier (positions are 0-indexed)::

    YY MM DD SSSS C
    0  2  4  6    10

- ``YY``: last two digits of the birth year
- ``MM``: birth month plus a century offset (see ``CENTURY_OFFSETS``)
- ``DD``: day of month
- ``SSSS``: serial; the parity of its last digit encodes gender
- ``C``: checksum digit (see ``checksum``)
"""

import logging
import re
from types import MappingProxyType

from ..core.models import BirthDate, Gender, IdentifierReport
from .checksum import checksum, is_valid_checksum
from .dates import is_valid_date
from .errors import IdentifierError, InvalidDate, InvalidFormat, InvalidInput

logger = logging.getLogger(__name__)


# =============================================================================
# Fixed tables
# =============================================================================

# Century (first two digits of the year) -> additive month offset
CENTURY_OFFSETS = MappingProxyType({18: 80, 19: 0, 20: 20, 21: 40, 22: 60})

MIN_YEAR = 1800
MAX_YEAR = 2299

# field -> (min, max, message)
_BOUNDS: dict[str, tuple[int, int, str]] = {
    "year": (MIN_YEAR, MAX_YEAR, "Year is not a valid 4 digit number"),
    "month": (1, 12, "Month is not a valid number"),
    "day": (1, 31, "Day is not a valid number"),
    "serial": (0, 9999, "Serial is not a valid number"),
}

_IDENTIFIER_RE = re.compile(r"^[0-9]{11}$")


# =============================================================================
# Helpers
# =============================================================================


def _coerce(field: str, value: int | str) -> int:
    """Convert a field to int and enforce its bounds."""
    low, high, message = _BOUNDS[field]
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{message}: {value!r}", field=field) from None
    if number < low or number > high:
        raise InvalidInput(f"{message}: {value!r}", field=field)
    return number


def _has_digits(identifier: str, length: int) -> bool:
    head = identifier[:length]
    return len(head) == length and head.isascii() and head.isdigit()


def _require_digits(identifier: str, length: int) -> str:
    if not isinstance(identifier, str):
        raise InvalidFormat("Identifier is not a string")
    if not _has_digits(identifier, length):
        raise InvalidFormat(f"Identifier needs {length} leading digits: {identifier!r}")
    return identifier


# =============================================================================
# Public operations
# =============================================================================


def encode(
    year: int | str, month: int | str, day: int | str, serial: int | str
) -> str:
    """Build an 11-digit identifier from a birth date and serial number.

    Args:
        year: Full year, 1800-2299
        month: 1-12
        day: 1-31 (and valid for the month)
        serial: 0-9999; odd last digit means male

    Returns:
        The identifier including its checksum digit.

    Raises:
        InvalidInput: A field is non-numeric or out of bounds.
        InvalidDate: The date does not exist.
    """
    year_n = _coerce("year", year)
    month_n = _coerce("month", month)
    day_n = _coerce("day", day)
    serial_n = _coerce("serial", serial)

    if not is_valid_date(year_n, month_n, day_n):
        logger.debug("Rejected date %s-%s-%s", year_n, month_n, day_n)
        raise InvalidDate(f"Not a valid date: {year_n}-{month_n:02d}-{day_n:02d}")

    offset = CENTURY_OFFSETS.get(year_n // 100)
    if offset is None:
        raise InvalidInput(f"Unsupported century for year {year_n}", field="year")

    encoded_month = (offset + month_n) % 100
    start = f"{year_n % 100:02d}{encoded_month:02d}{day_n:02d}{serial_n:04d}"
    return start + checksum(start)


def decode(identifier: str) -> BirthDate:
    """Extract the (year, month, day) embedded in an identifier.

    The date is not validated; use ``validate`` for that.
    """
    _require_digits(identifier, 6)
    yy = int(identifier[0:2])
    encoded_month = int(identifier[2:4])
    day = int(identifier[4:6])

    # ceil(encoded_month / 20) % 5 selects the century block
    century_index = (-(-encoded_month // 20)) % 5
    return BirthDate(
        year=MIN_YEAR + 100 * century_index + yy,
        month=encoded_month % 20,
        day=day,
    )


def validate(identifier: str) -> bool:
    """Check format and embedded date. Never returns False.

    The checksum is deliberately not checked here; see ``is_valid_checksum``.

    Raises:
        InvalidFormat: Not a string of exactly 11 digits.
        InvalidDate: The embedded date does not exist.
    """
    if not isinstance(identifier, str):
        raise InvalidFormat("Identifier is not a string")
    candidate = identifier.strip()
    if not _IDENTIFIER_RE.match(candidate):
        raise InvalidFormat(f"Identifier is not valid: {identifier!r}")

    birth = decode(candidate)
    if (
        birth.month < 1
        or birth.month > 12
        or birth.day < 1
        or not is_valid_date(*birth)
    ):
        logger.debug("Identifier %s carries impossible date %s", candidate, birth)
        raise InvalidDate(f"Not a valid date: {birth.isoformat()}")
    return True


def gender_of(identifier: str) -> Gender:
    """Odd 10th digit means male, even means female."""
    _require_digits(identifier, 10)
    return Gender.MALE if int(identifier[9]) % 2 else Gender.FEMALE


def inspect_identifier(identifier: str) -> IdentifierReport:
    """Run every check on an identifier and collect the results.

    Validation failures are recorded in ``error`` instead of raised.
    """
    if not isinstance(identifier, str):
        return IdentifierReport(
            identifier=repr(identifier), error="Identifier is not a string"
        )

    fields: dict = {"identifier": identifier}
    try:
        fields["valid"] = validate(identifier)
    except IdentifierError as e:
        fields["error"] = str(e)

    candidate = identifier.strip()
    fields["valid_checksum"] = is_valid_checksum(candidate)
    if _has_digits(candidate, 6):
        fields["birth_date"] = decode(candidate).isoformat()
    if _has_digits(candidate, 10):
        fields["checksum"] = checksum(candidate)
        fields["gender"] = gender_of(candidate)
    return IdentifierReport(**fields)


class IdentifierCodec:
    """Stateless facade grouping the identifier operations."""

    offsets = CENTURY_OFFSETS

    encode = staticmethod(encode)
    decode = staticmethod(decode)
    validate = staticmethod(validate)
    checksum = staticmethod(checksum)
    is_valid_checksum = staticmethod(is_valid_checksum)
    gender_of = staticmethod(gender_of)
    inspect = staticmethod(inspect_identifier)
