"""Weighted checksum over the first ten identifier digits."""

from .errors import InvalidFormat

CHECKSUM_WEIGHTS: tuple[int, ...] = (9, 7, 3, 1, 9, 7, 3, 1, 9, 7)


def checksum(digits: str) -> str:
    """Compute the check digit for a 10- or 11-digit identifier.

    Only the first ten characters are used. The result is ``sum % 10``
    with no 10 -> 0 remapping.

    Raises:
        InvalidFormat: If fewer than ten digits are available.
    """
    head = str(digits)[: len(CHECKSUM_WEIGHTS)]
    if len(head) < len(CHECKSUM_WEIGHTS) or not head.isascii() or not head.isdigit():
        raise InvalidFormat(f"Checksum needs 10 leading digits, got {digits!r}")
    total = sum(weight * int(ch) for weight, ch in zip(CHECKSUM_WEIGHTS, head))
    return str(total % 10)


def is_valid_checksum(identifier: str) -> bool:
    """True if the 11th character matches the recomputed check digit."""
    identifier = str(identifier)
    if len(identifier) < 11:
        return False
    try:
        return checksum(identifier) == identifier[10]
    except InvalidFormat:
        return False


class ChecksumCalculator:
    """Stateless facade over the check-digit functions."""

    weights = CHECKSUM_WEIGHTS

    compute = staticmethod(checksum)
    is_valid = staticmethod(is_valid_checksum)
