"""Command-line interface for peselkit."""

from .app import app

__all__ = ["app"]
