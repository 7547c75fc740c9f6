"""Shared CLI app objects."""

import typer
from rich.console import Console

app = typer.Typer(
    name="trifused",
    help="Website security scanner: leaked secrets, exposed files and header posture",
    no_args_is_help=True,
)
console = Console()
