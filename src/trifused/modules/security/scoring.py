"""Security score aggregation."""

from collections.abc import Iterable

from .models import ExposedFileFinding, SecretFinding

SECRET_PENALTIES: dict[str, int] = {"critical": 25, "high": 15, "medium": 8, "low": 3}
EXPOSED_FILE_PENALTIES: dict[str, int] = {"critical": 20, "high": 12, "medium": 6, "low": 2}


def total_penalty(
    secrets: Iterable[SecretFinding],
    exposed_files: Iterable[ExposedFileFinding],
) -> int:
    penalty = sum(SECRET_PENALTIES.get(secret.severity, 0) for secret in secrets)
    penalty += sum(EXPOSED_FILE_PENALTIES.get(file.severity, 0) for file in exposed_files)
    return penalty


def calculate_security_score(
    secrets: Iterable[SecretFinding],
    exposed_files: Iterable[ExposedFileFinding],
) -> int:
    """100 minus the summed severity penalties, clamped once to [0, 100]."""
    return max(0, min(100, 100 - total_penalty(secrets, exposed_files)))
