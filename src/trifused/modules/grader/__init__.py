"""Website grader security flow: URL guard, page fetch and scan."""

from .page import GRADER_USER_AGENT, PageSnapshot, fetch_page
from .service import SiteSecurityReport, grade_site
from .url_guard import ScanRequestGuard, is_private_address, validate_url

__all__ = [
    "GRADER_USER_AGENT",
    "PageSnapshot",
    "ScanRequestGuard",
    "SiteSecurityReport",
    "fetch_page",
    "grade_site",
    "is_private_address",
    "validate_url",
]
