"""Tests for report rendering."""

import json
from pathlib import Path

from rich.console import Console

from trifused.modules.grader import SiteSecurityReport
from trifused.modules.report import generate_json_report, package_version, print_site_report
from trifused.modules.security import ExposedFileFinding, SecurityScanResult
from trifused.tools.http import check_header_posture


def _report() -> SiteSecurityReport:
    exposed = ExposedFileFinding(
        path="/.env",
        type="Environment File",
        severity="critical",
        description="Environment variables file exposed",
        remediation="Remove or restrict access to /.env.",
    )
    return SiteSecurityReport(
        url="http://example.com",
        final_url="http://example.com/",
        status_code=200,
        security=SecurityScanResult(exposed_files=[exposed], security_score=80, scan_duration=7),
        header_posture=check_header_posture("http://example.com/", {}),
    )


class TestJsonReport:
    """Test the JSON report."""

    def test_contains_metadata_and_result(self):
        """Test that the report holds metadata and the result."""
        data = json.loads(generate_json_report(_report(), "http://example.com"))

        meta = data["report_metadata"]
        assert meta["target"] == "http://example.com"
        assert meta["tool"] == "TriFused Security Scanner"
        assert meta["version"] == package_version()
        assert "generated_at" in meta
        assert data["result"]["security"]["exposedFiles"][0]["path"] == "/.env"
        assert data["result"]["security"]["secretsFound"] == []

    def test_scan_result_alone(self):
        """Test the report of a bare scan result."""
        result = SecurityScanResult(security_score=100, scan_duration=3)

        data = json.loads(generate_json_report(result, "https://example.com"))

        assert data["result"] == {
            "secretsFound": [],
            "exposedFiles": [],
            "securityScore": 100,
            "scanDuration": 3,
        }

    def test_writes_file(self, temp_dir: Path):
        """Test that the report is written to a file."""
        output = temp_dir / "out" / "report.json"

        text = generate_json_report(_report(), "http://example.com", output)

        assert output.read_text(encoding="utf-8") == text


class TestConsoleReport:
    """Test the console report."""

    def test_renders_findings_and_headers(self):
        """Test that findings and headers are rendered."""
        console = Console(record=True, width=160)

        print_site_report(_report(), console)

        output = console.export_text()
        assert "80/100" in output
        assert "/.env" in output
        assert "Site not using HTTPS" in output

    def test_clean_report(self):
        """Test the report of a clean site."""
        console = Console(record=True, width=160)
        report = _report()
        report.security = SecurityScanResult()

        print_site_report(report, console)

        assert "No leaked secrets or exposed files detected" in console.export_text()
