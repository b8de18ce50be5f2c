"""Checksum command."""

import typer

from ..app import app, console, get_json_mode
from ..utils import Output
from ...identifier import IdentifierError, checksum


@app.command("checksum")
def checksum_command(
    digits: str = typer.Argument(..., help="First 10 (or all 11) identifier digits"),
):
    """
    Compute the check digit for a 10- or 11-digit identifier.

    Example:
        peselkit checksum 4285100007
    """
    out = Output(console=console, json_mode=get_json_mode())

    try:
        digit = checksum(digits.strip())
    except IdentifierError as e:
        out.error(str(e), category=type(e).__name__)
        raise typer.Exit(out.finish())

    if out.json_mode:
        out.set_data("checksum", digit)
    else:
        out.text(digit)
    raise typer.Exit(out.finish())
