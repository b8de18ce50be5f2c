"""Config command for viewing and managing peselkit configuration."""

import typer

from ..app import app, console
from ...config import (
    CONFIG_FILE,
    get_config,
    parse_bool,
    reset_config,
)


VALID_KEYS = {
    "password.use_common_symbols",
    "password.blacklist_file",
    "generator.from_year",
    "generator.to_year",
    "cli.mode",
}

INT_FIELDS = {"from_year", "to_year"}
BOOL_FIELDS = {"use_common_symbols"}
CLI_MODES = {"human", "agent"}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. password.use_common_symbols, generator.from_year)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify peselkit configuration.

    Examples:
        peselkit config show
        peselkit config set password.use_common_symbols true
        peselkit config set generator.from_year 1950
        peselkit config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] peselkit config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]peselkit Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Password[/bold cyan]")
    console.print(f"  use_common_symbols = {config.password.use_common_symbols}")
    blacklist = config.password.blacklist_file or "[dim](none)[/dim]"
    console.print(f"  blacklist_file     = {blacklist}")

    console.print()
    console.print("[bold cyan]Generator[/bold cyan]")
    console.print(f"  from_year = {config.generator.from_year}")
    to_year = config.generator.to_year or "[dim](current year)[/dim]"
    console.print(f"  to_year   = {to_year}")

    console.print()
    console.print("[bold cyan]CLI[/bold cyan]")
    console.print(f"  mode = {config.cli.mode}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    config = get_config()
    section, field_name = key.split(".", 1)
    target = getattr(config, section)

    # Type coercion
    if field_name in INT_FIELDS:
        try:
            setattr(target, field_name, int(value))
        except ValueError:
            console.print(f"[red]Invalid integer value:[/red] {value}")
            raise typer.Exit(1)
    elif field_name in BOOL_FIELDS:
        try:
            setattr(target, field_name, parse_bool(value))
        except ValueError:
            console.print(f"[red]Invalid boolean value:[/red] {value}")
            raise typer.Exit(1)
    elif key == "cli.mode" and value not in CLI_MODES:
        console.print(f"[red]Invalid mode:[/red] {value} (expected human or agent)")
        raise typer.Exit(1)
    else:
        setattr(target, field_name, value)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
