"""Password command: score a password's strength."""

from pathlib import Path

import typer

from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output


def _flag(value: int) -> str:
    return "[red]yes[/red]" if value else "[green]no[/green]"


@app.command("password")
def password_command(
    password: str = typer.Argument(..., help="Password to score"),
    common_symbols: bool = typer.Option(
        None,
        "--common-symbols/--all-symbols",
        help="Count only !@#$%^&*-_| as symbols (default from config)",
    ),
    blacklist: Path | None = typer.Option(
        None,
        "--blacklist",
        "-b",
        help="Newline-delimited file of forbidden passwords",
    ),
):
    """
    Score a password: charset usage, entropy, complexity and penalties.

    Example:
        peselkit password 'Tr0ub4dor&3'
        peselkit password hunter2 --blacklist rockyou.txt
    """
    from ...config import get_config
    from ...password import load_blacklist, score_password

    config = get_config()
    out = Output(console=console, json_mode=get_json_mode())

    if common_symbols is None:
        common_symbols = config.password.use_common_symbols
    if blacklist is None and config.password.blacklist_file:
        blacklist = Path(config.password.blacklist_file)

    words: frozenset[str] = frozenset()
    if blacklist is not None:
        if not blacklist.exists():
            out.error(
                f"Blacklist not found: {blacklist}", exit_code=ExitCode.FILE_NOT_FOUND
            )
            raise typer.Exit(out.finish())
        try:
            words = load_blacklist(blacklist)
        except (OSError, UnicodeDecodeError) as e:
            out.error(f"Could not read blacklist {blacklist}: {e}")
            raise typer.Exit(out.finish())

    metrics = score_password(password, common_symbols, words)
    if metrics is None:
        out.error("Password is empty")
        raise typer.Exit(out.finish())

    if out.json_mode:
        out.set_data("metrics", metrics.to_flat_dict())
        raise typer.Exit(out.finish())

    out.table(
        "Charsets",
        ["Charset", "Count", "Alphabet"],
        [
            [name, str(usage.count), str(usage.length)]
            for name, usage in metrics.charsets.items()
        ],
    )
    console.print(f"  length              {metrics.password_length}")
    console.print(f"  alphabet (total)    {metrics.total_alphabet_size}")
    console.print(f"  alphabet (used)     {metrics.used_alphabet_size}")
    console.print(f"  complexity          {metrics.complexity}")
    console.print(f"  entropy             {metrics.entropy_bits} bits")
    console.print(f"  strength            {metrics.strength_percent:.2f}%")
    console.print(f"  variations          {metrics.variations}")
    console.print(f"  weak construction   {_flag(metrics.penalize_construction)}")
    console.print(f"  repeated chars      {_flag(metrics.penalize_repeats)}")
    console.print(f"  blacklisted         {_flag(metrics.penalize_blacklisted)}")
    console.print(f"  too short           {_flag(metrics.penalize_length)}")
    raise typer.Exit(out.finish())
