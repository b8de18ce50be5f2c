"""Exceptions raised by the identifier codec.

All of them derive from ``IdentifierError`` (itself a ``ValueError``) so
callers can catch the whole family in one place.
"""


class IdentifierError(ValueError):
    """Base class for identifier encode/decode/validate failures."""

    pass


class InvalidInput(IdentifierError):
    """Raised when a numeric field is out of bounds or not a number."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class InvalidDate(IdentifierError):
    """Raised when a year/month/day combination is not a calendar date."""

    pass


class InvalidFormat(IdentifierError):
    """Raised when an identifier is not a string of the expected digits."""

    pass
