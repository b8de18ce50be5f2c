"""Encode command: build an identifier from a birth date and serial."""

import typer

from ..app import app, console, get_json_mode
from ..utils import Output
from ...identifier import IdentifierError, encode


@app.command("encode")
def encode_command(
    year: str = typer.Argument(..., help="Full birth year (1800-2299)"),
    month: str = typer.Argument(..., help="Birth month (1-12)"),
    day: str = typer.Argument(..., help="Birth day (1-31)"),
    serial: str = typer.Argument(
        ..., help="Serial number (0-9999); odd last digit = male"
    ),
):
    """
    Encode a birth date and serial into an 11-digit identifier.

    Example:
        peselkit encode 1990 5 17 1234
        peselkit encode 1842 5 10 0007
    """
    out = Output(console=console, json_mode=get_json_mode())

    try:
        identifier = encode(year, month, day, serial)
    except IdentifierError as e:
        out.error(str(e), category=type(e).__name__)
        raise typer.Exit(out.finish())

    if out.json_mode:
        out.set_data("identifier", identifier)
    else:
        out.text(identifier)
    raise typer.Exit(out.finish())
