"""Version CLI command."""

from .deps import cli_module
from .shared import app, console


@app.command()
def version() -> None:
    """Show the installed TriFused version."""
    console.print(f"TriFused {cli_module().package_version()}")
