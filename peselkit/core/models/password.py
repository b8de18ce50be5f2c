"""Password strength metrics model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CharsetUsage(BaseModel):
    """How many characters of one charset a password uses."""

    model_config = ConfigDict(frozen=True)

    count: int
    length: int = Field(description="Alphabet size of the charset")


class PasswordMetrics(BaseModel):
    """Strength metrics computed from a single password.

    ``variations`` and ``entropy_pow`` are exact integers and grow without
    bound with password length; convert to float only for display.
    """

    model_config = ConfigDict(frozen=True)

    password: str
    password_length: int
    charsets: dict[str, CharsetUsage]
    total_alphabet_size: int
    used_alphabet_size: int
    entropy_bits: int
    entropy_pow: int
    variations: int
    strength_percent: float
    complexity: int
    penalize_construction: int = 0
    penalize_repeats: int = 0
    penalize_blacklisted: int = 0
    penalize_length: int = 0

    @property
    def penalties(self) -> dict[str, int]:
        return {
            "construction": self.penalize_construction,
            "repeats": self.penalize_repeats,
            "blacklisted": self.penalize_blacklisted,
            "length": self.penalize_length,
        }

    def to_flat_dict(self) -> dict[str, Any]:
        """Render as a single-level dict with chars_*/calc_*/penalize_* keys."""
        flat: dict[str, Any] = {}
        for name, usage in self.charsets.items():
            flat[f"chars_{name}_count"] = usage.count
            flat[f"chars_{name}_length"] = usage.length
        flat.update(
            {
                "chars_total": self.total_alphabet_size,
                "chars_used": self.used_alphabet_size,
                "password": self.password,
                "password_length": self.password_length,
                "calc_entropy": self.entropy_bits,
                "calc_entropy_pow": self.entropy_pow,
                "calc_variations": self.variations,
                "calc_strength": self.strength_percent,
                "calc_complexity": self.complexity,
                "penalize_construction": self.penalize_construction,
                "penalize_blacklisted": self.penalize_blacklisted,
                "penalize_length": self.penalize_length,
                "penalize_repeats": self.penalize_repeats,
            }
        )
        return flat
