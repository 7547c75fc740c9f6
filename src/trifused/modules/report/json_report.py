"""JSON report rendering."""

import json
from datetime import UTC, datetime
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any


def package_version() -> str:
    try:
        return version("trifused-scanner")
    except PackageNotFoundError:
        return "0.0.0+unknown"


def generate_json_report(
    report: Any,
    target: str,
    output_path: Path | None = None,
) -> str:
    """Render a scan or site report as JSON, optionally writing it to disk.

    ``report`` is anything with a ``to_dict()`` method.
    """
    report_data = {
        "report_metadata": {
            "generated_at": datetime.now(UTC).isoformat(),
            "tool": "TriFused Security Scanner",
            "version": package_version(),
            "target": target,
        },
        "result": report.to_dict(),
    }
    text = json.dumps(report_data, indent=2)
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    return text
