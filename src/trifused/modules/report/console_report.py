"""Rich console rendering of a site security report."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from trifused.modules.grader import SiteSecurityReport

SEVERITY_STYLES = {
    "critical": "bold red",
    "high": "red",
    "medium": "yellow",
    "low": "cyan",
}


def _score_style(score: int) -> str:
    if score >= 90:
        return "green"
    if score >= 70:
        return "yellow"
    return "red"


def _severity(severity: str) -> str:
    style = SEVERITY_STYLES.get(severity, "white")
    return f"[{style}]{severity}[/{style}]"


def print_site_report(report: SiteSecurityReport, console: Console) -> None:
    """Print score panel, finding tables and header posture."""
    security = report.security
    counts = security.severity_counts()
    score_style = _score_style(security.security_score)
    header_style = _score_style(report.header_posture.score)

    console.print(
        Panel(
            f"[bold]Target:[/bold] {report.final_url} (HTTP {report.status_code})\n"
            f"[bold]Security score:[/bold] [{score_style}]{security.security_score}/100"
            f"[/{score_style}]\n"
            f"[bold]Header score:[/bold] [{header_style}]{report.header_posture.score}/100"
            f"[/{header_style}]\n"
            f"[bold]Findings:[/bold] {security.findings_count} "
            f"({counts['critical']} critical, {counts['high']} high)\n"
            f"[dim]Scan took {security.scan_duration}ms[/dim]",
            title="TriFused Security Scan",
            border_style=score_style,
        )
    )

    if security.secrets_found:
        table = Table(title="Exposed secrets", show_lines=False)
        table.add_column("Type")
        table.add_column("Severity")
        table.add_column("Value")
        table.add_column("Remediation", overflow="fold")
        for secret in security.secrets_found:
            table.add_row(
                secret.type, _severity(secret.severity), secret.value, secret.remediation
            )
        console.print(table)

    if security.exposed_files:
        table = Table(title="Exposed files")
        table.add_column("Path")
        table.add_column("Type")
        table.add_column("Severity")
        table.add_column("Description", overflow="fold")
        for exposed in security.exposed_files:
            table.add_row(
                exposed.path, exposed.type, _severity(exposed.severity), exposed.description
            )
        console.print(table)

    if not security.findings_count:
        console.print("[green]No leaked secrets or exposed files detected.[/green]")

    failed = report.header_posture.failed
    if failed:
        table = Table(title="Header posture")
        table.add_column("Issue")
        table.add_column("Priority")
        table.add_column("How to fix", overflow="fold")
        for finding in failed:
            table.add_row(finding.issue, finding.priority, finding.how_to_fix)
        console.print(table)
