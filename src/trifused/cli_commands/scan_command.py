"""Scan CLI command."""

from pathlib import Path
from typing import Optional

import typer

from trifused.errors import TriFusedError
from trifused.utils.async_utils import safe_async_run
from trifused.utils.log_setup import configure_logging

from .deps import cli_module
from .shared import app, console


@app.command()
def scan(
    url: str = typer.Argument(..., help="Absolute http(s) URL of the page to grade"),
    json_output: bool = typer.Option(False, "--json", help="Print the JSON report"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the JSON report to this file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
    no_url_check: bool = typer.Option(
        False,
        "--no-url-check",
        help="Skip the private-address guard (lab targets only)",
    ),
) -> None:
    """Scan a site for leaked secrets, exposed files and missing security headers."""
    cli = cli_module()
    configure_logging(verbose)

    try:
        limits = cli.get_scan_limits()
        check_url = not (no_url_check or cli.allow_private_targets())
        page_timeout_ms = cli.get_page_timeout_ms()
        if not json_output:
            console.print(f"[blue]Scanning {url}...[/blue]")
        report = safe_async_run(
            cli.grade_site(
                url,
                limits=limits,
                check_url=check_url,
                page_timeout_ms=page_timeout_ms,
            )
        )
    except TriFusedError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1) from exc

    text = cli.generate_json_report(report, url, output)
    if json_output:
        # Plain print keeps the JSON free of console markup
        print(text)
    else:
        cli.print_site_report(report, console)
    if output is not None and not json_output:
        console.print(f"[dim]JSON report written to {output}[/dim]")
