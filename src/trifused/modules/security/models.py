"""Data models for security scan findings and results."""

from dataclasses import asdict, dataclass, field
from typing import Literal

Severity = Literal["critical", "high", "medium", "low"]

SEVERITIES: tuple[Severity, ...] = ("critical", "high", "medium", "low")

SECRET_LOCATION = "JavaScript bundle or HTML"


@dataclass(frozen=True)
class SecretFinding:
    """A leaked credential. ``value`` is always masked."""

    type: str
    pattern: str
    value: str
    location: str
    severity: Severity
    remediation: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ExposedFileFinding:
    """A sensitive file served by the target."""

    path: str
    type: str
    severity: Severity
    description: str
    remediation: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class SecurityScanResult:
    """Outcome of one orchestrated scan."""

    secrets_found: list[SecretFinding] = field(default_factory=list)
    exposed_files: list[ExposedFileFinding] = field(default_factory=list)
    security_score: int = 100
    scan_duration: int = 0  # milliseconds

    @property
    def findings_count(self) -> int:
        return len(self.secrets_found) + len(self.exposed_files)

    def severity_counts(self) -> dict[str, int]:
        counts = dict.fromkeys(SEVERITIES, 0)
        for finding in [*self.secrets_found, *self.exposed_files]:
            counts[finding.severity] += 1
        return counts

    def to_dict(self) -> dict[str, object]:
        """Serialize with the camelCase keys the grader front-end expects."""
        return {
            "secretsFound": [finding.to_dict() for finding in self.secrets_found],
            "exposedFiles": [finding.to_dict() for finding in self.exposed_files],
            "securityScore": self.security_score,
            "scanDuration": self.scan_duration,
        }
