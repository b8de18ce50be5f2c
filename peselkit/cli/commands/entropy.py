"""Entropy command: theoretical entropy from character-class counts."""

import typer

from ..app import app, console, get_json_mode
from ..utils import Output
from ...password import estimate_entropy


@app.command("entropy")
def entropy_command(
    lower: int = typer.Option(0, "--lower", "-l", min=0, help="Lowercase letters"),
    upper: int = typer.Option(0, "--upper", "-u", min=0, help="Uppercase letters"),
    digits: int = typer.Option(0, "--digits", "-d", min=0, help="Digits"),
    special: int = typer.Option(0, "--special", "-s", min=0, help="Special chars"),
):
    """
    Estimate entropy in bits for a password shape.

    Example:
        peselkit entropy --lower 6 --upper 1 --digits 2
    """
    out = Output(console=console, json_mode=get_json_mode())
    bits = estimate_entropy(lower, upper, digits, special)

    if out.json_mode:
        out.set_data("entropy_bits", bits)
    else:
        out.text(f"{bits} bits")
    raise typer.Exit(out.finish())
