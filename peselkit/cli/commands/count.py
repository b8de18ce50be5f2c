"""Count command: size of the identifier space over a date range."""

import typer

from ..app import app, console, get_json_mode
from ..utils import Output
from ...identifier import as_date, count_combinations


@app.command("count")
def count_command(
    from_date: str = typer.Argument(..., help="First birth date (YYYY-MM-DD)"),
    to_date: str = typer.Argument(..., help="Last birth date (YYYY-MM-DD)"),
    gender_known: bool = typer.Option(
        False, "--gender-known", "-g", help="Gender is known (halves the space)"
    ),
):
    """
    Count how many identifiers exist for birth dates in a range.

    Example:
        peselkit count 1990-01-01 1990-12-31
        peselkit count 1990-01-01 1990-01-01 --gender-known
    """
    out = Output(console=console, json_mode=get_json_mode())

    try:
        start, end = as_date(from_date), as_date(to_date)
    except ValueError as e:
        out.error(f"Invalid date: {e}")
        raise typer.Exit(out.finish())

    total = count_combinations(start, end, gender_known)

    if out.json_mode:
        out.set_data("count", total)
    else:
        out.text(f"{total:,}")
    raise typer.Exit(out.finish())
