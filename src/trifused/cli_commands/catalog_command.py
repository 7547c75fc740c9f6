"""Catalog listing CLI command."""

import typer
from rich.table import Table

from trifused.modules.security import EXPOSED_FILE_PATHS, SECRET_PATTERNS, SOURCE_MAP_PATHS

from .shared import app, console

_KINDS = ("secrets", "paths")


@app.command()
def catalog(
    kind: str = typer.Argument("secrets", help="Catalog to list: secrets, paths"),
) -> None:
    """List the secret detectors or the probed sensitive paths."""
    kind = kind.strip().lower()
    if kind not in _KINDS:
        console.print(f"[red]Unknown catalog '{kind}'. Choose one of: {', '.join(_KINDS)}[/red]")
        raise typer.Exit(1)

    if kind == "secrets":
        table = Table(title=f"Secret detectors ({len(SECRET_PATTERNS)})")
        table.add_column("Name")
        table.add_column("Severity")
        table.add_column("Pattern", overflow="fold")
        for entry in SECRET_PATTERNS:
            table.add_row(entry.name, entry.severity, entry.source)
        console.print(table)
        return

    table = Table(title=f"Sensitive paths ({len(EXPOSED_FILE_PATHS)})")
    table.add_column("#", justify="right")
    table.add_column("Path")
    table.add_column("Type")
    table.add_column("Severity")
    for index, entry in enumerate(EXPOSED_FILE_PATHS, start=1):
        table.add_row(str(index), entry.path, entry.type, entry.severity)
    console.print(table)
    console.print(f"[dim]Source map probes: {', '.join(SOURCE_MAP_PATHS)}[/dim]")
