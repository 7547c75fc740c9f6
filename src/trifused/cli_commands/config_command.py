"""Configuration CLI command."""

import typer

from trifused.errors import ConfigError

from .deps import cli_module
from .shared import app, console


@app.command()
def config() -> None:
    """Show the effective scan limits after applying configuration."""
    cli = cli_module()
    try:
        limits = cli.get_scan_limits()
    except ConfigError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1) from exc

    console.print("[bold]Effective scan limits:[/bold]")
    for name, value in vars(limits).items():
        console.print(f"  {name}: {value}")
    console.print(f"[dim]Global config: {cli.get_global_config_path()}[/dim]")
    console.print(f"[dim]Project config: {cli.get_project_env_path()}[/dim]")
