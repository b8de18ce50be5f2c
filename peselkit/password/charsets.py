"""Character classes used for password scoring.

The symbols class comes in two fixed variants selected as a whole by
``SymbolSet``: the restricted set of common keyboard symbols, or anything
that is not an ASCII letter or digit.
"""

import re
from dataclasses import dataclass
from enum import Enum


class SymbolSet(str, Enum):
    RESTRICTED = "restricted"  # !@#$%^&*-_|
    UNRESTRICTED = "unrestricted"  # all printable ASCII punctuation

    @classmethod
    def from_flag(cls, use_common: bool) -> "SymbolSet":
        return cls.RESTRICTED if use_common else cls.UNRESTRICTED


@dataclass(frozen=True)
class Charset:
    """A named character class with a fixed alphabet size."""

    name: str
    pattern: re.Pattern
    length: int

    def count(self, password: str) -> int:
        return len(self.pattern.findall(password))


LOWERCASE = Charset("lowercase", re.compile(r"[a-z]"), 26)
UPPERCASE = Charset("uppercase", re.compile(r"[A-Z]"), 26)
NUMBERS = Charset("numbers", re.compile(r"[0-9]"), 10)

_SYMBOLS: dict[SymbolSet, Charset] = {
    SymbolSet.RESTRICTED: Charset("symbols", re.compile(r"[!@#$%^&*\-_|]"), 11),
    SymbolSet.UNRESTRICTED: Charset("symbols", re.compile(r"[^a-zA-Z0-9]"), 33),
}
_VARIANT_NAMES = frozenset(s.value for s in SymbolSet)


def charsets_for(symbols: SymbolSet | bool | None) -> tuple[Charset, ...]:
    """The four scoring charsets, in fixed order, for a symbols variant.

    Anything that is not a ``SymbolSet`` is read as the "use common symbols"
    flag by truthiness, so a missing flag selects the unrestricted variant.
    """
    if isinstance(symbols, str) and symbols in _VARIANT_NAMES:
        symbols = SymbolSet(symbols)
    if not isinstance(symbols, SymbolSet):
        symbols = SymbolSet.from_flag(bool(symbols))
    return (LOWERCASE, UPPERCASE, NUMBERS, _SYMBOLS[symbols])
