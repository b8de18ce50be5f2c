"""List command: every identifier for a date range, as a wordlist."""

from pathlib import Path

import typer

from ..app import app, console, get_json_mode
from ..utils import Output
from ...identifier import IdentifierError, as_date, generate_identifiers


@app.command("list")
def list_command(
    from_date: str = typer.Argument(..., help="First birth date (YYYY-MM-DD)"),
    to_date: str = typer.Argument(..., help="Last birth date (YYYY-MM-DD)"),
    gender: str = typer.Option("A", "--gender", "-g", help="M, F, or A (any)"),
    prefix: str = typer.Option("", "--prefix", help="Text prepended to each line"),
    suffix: str = typer.Option("", "--suffix", help="Text appended to each line"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write to file instead of stdout"
    ),
):
    """
    List every identifier born in a date range.

    One day with either gender is 10,000 lines; use --output for long ranges.

    Example:
        peselkit list 1990-05-17 1990-05-17 -g F
        peselkit list 1990-05-01 1990-05-31 --prefix user_ -o pesels.txt
    """
    out = Output(console=console, json_mode=get_json_mode())

    try:
        lines = generate_identifiers(
            as_date(from_date), as_date(to_date), gender, prefix, suffix
        )
    except (IdentifierError, ValueError) as e:
        out.error(str(e))
        raise typer.Exit(out.finish())

    if output is not None:
        written = 0
        with open(output, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
                written += 1
        out.success(f"Wrote {written:,} identifiers to {output}", count=written)
        out.set_data("output", str(output))
    elif out.json_mode:
        identifiers = list(lines)
        out.set_data("count", len(identifiers))
        out.set_data("identifiers", identifiers)
    else:
        for line in lines:
            out.text(line)
    raise typer.Exit(out.finish())
