"""TriFused CLI - website security scanner."""

from trifused.cli_commands import (  # noqa: F401
    catalog_command,
    config_command,
    info_command,
    scan_command,
)
from trifused.cli_commands.shared import app, console
from trifused.config import (
    allow_private_targets,
    get_global_config_path,
    get_page_timeout_ms,
    get_project_env_path,
    get_scan_limits,
)
from trifused.modules.grader import grade_site
from trifused.modules.report import generate_json_report, package_version, print_site_report

__all__ = [
    "allow_private_targets",
    "app",
    "console",
    "generate_json_report",
    "get_global_config_path",
    "get_page_timeout_ms",
    "get_project_env_path",
    "get_scan_limits",
    "grade_site",
    "main",
    "package_version",
    "print_site_report",
]


def main():
    """Entry point for the CLI."""
    app()
