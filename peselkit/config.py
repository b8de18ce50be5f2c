"""Configuration management for peselkit.

Three sections:
- password: symbols variant and blacklist file used by `peselkit password`
- generator: default year window for `peselkit random`
- cli: output mode

Config resolution order (highest priority first):
1. Programmatic (PeselkitConfig constructed in code)
2. Environment variables (PESELKIT_USE_COMMON_SYMBOLS, PESELKIT_FROM_YEAR, etc.)
3. Config file (~/.config/peselkit/config.json, managed by `peselkit config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "peselkit"
CONFIG_FILE = CONFIG_DIR / "config.json"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def parse_bool(value: str) -> bool:
    """Parse a permissive boolean string.

    Raises:
        ValueError: If the string is not a recognized boolean.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean: {value!r}")


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class PasswordConfig:
    """Password scoring defaults."""

    use_common_symbols: bool = False
    blacklist_file: str = ""  # empty = no blacklist


@dataclass
class GeneratorConfig:
    """Random identifier defaults."""

    from_year: int = 1800
    to_year: int | None = None  # None = current year


@dataclass
class CliConfig:
    """CLI behaviour.

    - human: rich terminal output (default)
    - agent: JSON output on every command
    """

    mode: str = "human"


@dataclass
class PeselkitConfig:
    """Top-level peselkit configuration.

    Examples:
        # Package use
        config = PeselkitConfig(password=PasswordConfig(use_common_symbols=True))

        # CLI use: loads from ~/.config/peselkit/config.json
        config = PeselkitConfig.load()
    """

    password: PasswordConfig = field(default_factory=PasswordConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    cli: CliConfig = field(default_factory=CliConfig)

    @classmethod
    def load(cls) -> "PeselkitConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: config file
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError, TypeError, ValueError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: env var overrides
        if val := os.environ.get("PESELKIT_USE_COMMON_SYMBOLS"):
            try:
                config.password.use_common_symbols = parse_bool(val)
            except ValueError:
                logger.warning("Invalid PESELKIT_USE_COMMON_SYMBOLS=%r, ignoring", val)
        if val := os.environ.get("PESELKIT_BLACKLIST_FILE"):
            config.password.blacklist_file = val
        if val := os.environ.get("PESELKIT_FROM_YEAR"):
            try:
                config.generator.from_year = int(val)
            except ValueError:
                logger.warning("Invalid PESELKIT_FROM_YEAR=%r, ignoring", val)
        if val := os.environ.get("PESELKIT_TO_YEAR"):
            try:
                config.generator.to_year = int(val)
            except ValueError:
                logger.warning("Invalid PESELKIT_TO_YEAR=%r, ignoring", val)
        if val := os.environ.get("PESELKIT_CLI_MODE"):
            config.cli.mode = val

        return config

    def save(self) -> None:
        """Save config to ~/.config/peselkit/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "password": asdict(self.password),
            "generator": asdict(self.generator),
            "cli": asdict(self.cli),
        }


# =============================================================================
# Config dict application
# =============================================================================

_INT_FIELDS = {"from_year", "to_year"}
_BOOL_FIELDS = {"use_common_symbols"}


def _apply_dict(config: PeselkitConfig, data: dict) -> None:
    """Apply a dict of values onto a PeselkitConfig."""
    for section in ("password", "generator", "cli"):
        values = data.get(section)
        if not isinstance(values, dict):
            continue
        target = getattr(config, section)
        for k, v in values.items():
            if not hasattr(target, k):
                continue
            if k in _INT_FIELDS and v is not None:
                v = int(v)
            elif k in _BOOL_FIELDS:
                v = parse_bool(v) if isinstance(v, str) else bool(v)
            setattr(target, k, v)


# =============================================================================
# Global config singleton
# =============================================================================

_config: PeselkitConfig | None = None


def get_config() -> PeselkitConfig:
    """Get the global PeselkitConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = PeselkitConfig.load()
    return _config


def configure(config: PeselkitConfig) -> None:
    """Set the global PeselkitConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
