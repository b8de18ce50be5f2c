"""Inspect command: validate an identifier and show what it encodes."""

import typer

from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output
from ...identifier import inspect_identifier


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


@app.command("inspect")
def inspect_command(
    identifier: str = typer.Argument(..., help="11-digit identifier"),
):
    """
    Validate an identifier and show its birth date, gender and checksum.

    Exits with code 1 if the format or embedded date is invalid. A bad
    checksum is reported but does not fail the command.

    Example:
        peselkit inspect 42851000077
    """
    out = Output(console=console, json_mode=get_json_mode())
    report = inspect_identifier(identifier)

    if out.json_mode:
        out.set_data("report", report.model_dump(mode="json"))
    else:
        console.print(f"[bold]{report.identifier}[/bold]")
        console.print(f"  valid           {_yes_no(report.valid)}")
        console.print(f"  valid checksum  {_yes_no(report.valid_checksum)}")
        if report.checksum is not None:
            console.print(f"  checksum        {report.checksum}")
        if report.birth_date is not None:
            console.print(f"  birth date      {report.birth_date}")
        if report.gender is not None:
            console.print(f"  gender          {report.gender.value}")

    if not report.valid:
        out.error(
            report.error or "Invalid identifier",
            exit_code=ExitCode.VALIDATION_ERROR,
        )
    raise typer.Exit(out.finish())
