"""Security scanning core: secret detection, exposed files and scoring."""

from .exposed_files import find_source_map, looks_like_exposed_file, scan_for_exposed_files
from .exposed_paths import EXPOSED_FILE_PATHS, SOURCE_MAP_PATHS, ExposedPathEntry
from .main import SecurityScanner, run_security_scan
from .models import ExposedFileFinding, SecretFinding, SecurityScanResult, Severity
from .patterns import FALSE_POSITIVE_MARKERS, SECRET_PATTERNS, SecretPattern
from .scoring import calculate_security_score
from .secrets import find_secrets, mask_secret, scan_for_secrets

__all__ = [
    "EXPOSED_FILE_PATHS",
    "ExposedFileFinding",
    "ExposedPathEntry",
    "FALSE_POSITIVE_MARKERS",
    "SECRET_PATTERNS",
    "SOURCE_MAP_PATHS",
    "SecretFinding",
    "SecretPattern",
    "SecurityScanResult",
    "SecurityScanner",
    "Severity",
    "calculate_security_score",
    "find_secrets",
    "find_source_map",
    "looks_like_exposed_file",
    "mask_secret",
    "run_security_scan",
    "scan_for_exposed_files",
    "scan_for_secrets",
]
