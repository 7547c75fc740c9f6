"""Report rendering for scan results."""

from .console_report import print_site_report
from .json_report import generate_json_report, package_version

__all__ = ["generate_json_report", "package_version", "print_site_report"]
