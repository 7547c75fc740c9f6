"""Security header posture check for the primary page."""

from dataclasses import dataclass, field


@dataclass
class HeaderFinding:
    """One pass/fail line of the header posture check."""

    issue: str
    impact: str
    priority: str
    how_to_fix: str = ""
    passed: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "issue": self.issue,
            "impact": self.impact,
            "priority": self.priority,
            "howToFix": self.how_to_fix,
            "passed": self.passed,
        }


@dataclass
class HeaderPostureResult:
    """Header findings plus the 0-100 header score."""

    url: str
    score: int
    findings: list[HeaderFinding] = field(default_factory=list)

    @property
    def failed(self) -> list[HeaderFinding]:
        return [finding for finding in self.findings if not finding.passed]

    def to_dict(self) -> dict[str, object]:
        return {
            "url": self.url,
            "score": self.score,
            "findings": [finding.to_dict() for finding in self.findings],
        }


def check_header_posture(url: str, headers: dict[str, str]) -> HeaderPostureResult:
    """Grade transport security and the common protective response headers."""
    # Headers may arrive in any case
    lowered = {key.lower(): value for key, value in headers.items()}
    is_https = url.lower().startswith("https://")
    findings: list[HeaderFinding] = []
    score = 100

    if is_https:
        findings.append(
            HeaderFinding("Site uses HTTPS", "Data is encrypted in transit", "optional", passed=True)
        )
    else:
        findings.append(
            HeaderFinding(
                "Site not using HTTPS",
                "HTTPS encrypts data and is required for modern SEO",
                "critical",
                "Install an SSL certificate and redirect all HTTP traffic to HTTPS",
            )
        )
        score -= 30

    if lowered.get("content-security-policy"):
        findings.append(
            HeaderFinding(
                "Content-Security-Policy header present",
                "Protection against XSS attacks",
                "optional",
                passed=True,
            )
        )
    else:
        findings.append(
            HeaderFinding(
                "Missing Content-Security-Policy header",
                "CSP helps prevent XSS attacks and data injection",
                "important",
                "Add a Content-Security-Policy header to your server configuration. "
                "Start with: Content-Security-Policy: default-src 'self'",
            )
        )
        score -= 15

    if lowered.get("x-frame-options"):
        findings.append(
            HeaderFinding(
                "X-Frame-Options header present",
                "Protection against clickjacking",
                "optional",
                passed=True,
            )
        )
    else:
        findings.append(
            HeaderFinding(
                "Missing X-Frame-Options header",
                "Your site could be embedded in iframes, enabling clickjacking attacks",
                "important",
                "Add header: X-Frame-Options: DENY "
                "(or SAMEORIGIN if you need iframes from your own domain)",
            )
        )
        score -= 10

    if lowered.get("x-content-type-options", "").strip().lower() == "nosniff":
        findings.append(
            HeaderFinding(
                "X-Content-Type-Options header present",
                "MIME-sniffing attacks prevented",
                "optional",
                passed=True,
            )
        )
    else:
        findings.append(
            HeaderFinding(
                "Missing X-Content-Type-Options header",
                "Browsers might MIME-sniff content, leading to security issues",
                "important",
                "Add header: X-Content-Type-Options: nosniff",
            )
        )
        score -= 10

    hsts = lowered.get("strict-transport-security")
    if hsts:
        findings.append(
            HeaderFinding("HSTS header present", "Forces HTTPS connections", "optional", passed=True)
        )
    elif is_https:
        findings.append(
            HeaderFinding(
                "Missing Strict-Transport-Security header",
                "Users could be downgraded to HTTP connections",
                "important",
                "Add header: Strict-Transport-Security: max-age=31536000; includeSubDomains",
            )
        )
        score -= 10

    return HeaderPostureResult(url=url, score=max(0, min(100, score)), findings=findings)
