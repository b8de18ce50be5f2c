"""CLI commands for peselkit."""

from . import (
    encode,
    inspect,
    checksum,
    random_cmd,
    count,
    list_cmd,
    password,
    entropy,
    config_cmd,
)

__all__ = [
    "encode",
    "inspect",
    "checksum",
    "random_cmd",
    "count",
    "list_cmd",
    "password",
    "entropy",
    "config_cmd",
]
