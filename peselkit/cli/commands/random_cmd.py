"""Random command: draw random identifiers within a year window."""

import random

import typer

from ..app import app, console, get_json_mode
from ..utils import Output


@app.command("random")
def random_command(
    from_year: int = typer.Option(
        None, "--from-year", "-f", help="Earliest birth year (default from config)"
    ),
    to_year: int = typer.Option(
        None, "--to-year", "-t", help="Latest birth year (default current year)"
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="How many to draw"),
    seed: int = typer.Option(None, "--seed", help="Seed for reproducible output"),
):
    """
    Generate random identifiers.

    Years outside 1800-2299 are clamped. The birth day is always the last
    day of the drawn month.

    Example:
        peselkit random
        peselkit random -f 1950 -t 1999 -n 5 --seed 42
    """
    from ...config import get_config
    from ...identifier import random_identifier

    config = get_config()
    if from_year is None:
        from_year = config.generator.from_year
    if to_year is None:
        to_year = config.generator.to_year

    out = Output(console=console, json_mode=get_json_mode())
    rng = random.Random(seed) if seed is not None else None

    identifiers = [
        random_identifier(from_year, to_year, rng=rng) for _ in range(count)
    ]

    if out.json_mode:
        out.set_data("identifiers", identifiers)
    else:
        for identifier in identifiers:
            out.text(identifier)
    raise typer.Exit(out.finish())
