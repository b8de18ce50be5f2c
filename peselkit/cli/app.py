"""Core CLI app definition and global state."""

from typing import Annotated

import typer
from rich.console import Console

from .utils import setup_logging

app = typer.Typer(
    name="peselkit",
    help="Encode, decode and generate PESEL identifiers; score passwords.",
    no_args_is_help=True,
)

console = Console()

# Global state for JSON mode (set by callback)
_json_mode = False


def get_json_mode() -> bool:
    """JSON output if --json was passed or the config selects agent mode."""
    if _json_mode:
        return True
    from ..config import get_config

    return get_config().cli.mode == "agent"


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        print(f"peselkit {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output machine-readable JSON instead of human-friendly text",
            is_eager=True,
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
):
    """peselkit: PESEL identifier toolkit and password strength checker.

    Use --json for machine-readable output suitable for scripting.
    """
    global _json_mode
    _json_mode = json_output
    if verbose:
        setup_logging(console, verbose=True)


# Import commands to register them with the app
from .commands import (  # noqa: E402, F401
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
