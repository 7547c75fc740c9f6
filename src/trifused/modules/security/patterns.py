"""Secret detector catalog.

Entries are evaluated independently and in order; several may match the same
text. All patterns use ASCII semantics for ``\\w`` and ``\\d``.
"""

import re
from dataclasses import dataclass

from .models import Severity


@dataclass(frozen=True)
class SecretPattern:
    """A named credential detector."""

    name: str
    pattern: re.Pattern[str]
    severity: Severity
    remediation: str

    @property
    def source(self) -> str:
        return self.pattern.pattern

    def describe(self) -> str:
        """Truncated pattern source used in findings."""
        return self.source[:30] + "..."

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "pattern": self.source,
            "severity": self.severity,
            "remediation": self.remediation,
        }


def _secret(
    name: str,
    source: str,
    severity: Severity,
    remediation: str,
    ignore_case: bool = False,
) -> SecretPattern:
    flags = re.ASCII | (re.IGNORECASE if ignore_case else 0)
    return SecretPattern(name, re.compile(source, flags), severity, remediation)


SECRET_PATTERNS: tuple[SecretPattern, ...] = (
    _secret(
        "OpenAI API Key",
        r"sk-[a-zA-Z0-9]{20,}T3BlbkFJ[a-zA-Z0-9]{20,}",
        "critical",
        "Move OpenAI API key to server-side environment variables. "
        "Never expose in client-side code.",
    ),
    _secret(
        "OpenAI Project Key",
        r"sk-proj-[a-zA-Z0-9_-]{80,}",
        "critical",
        "Move OpenAI project key to server-side environment variables.",
    ),
    _secret(
        "Stripe Secret Key",
        r"sk_live_[a-zA-Z0-9]{24,}",
        "critical",
        "Stripe secret keys must never be in client-side code. Use server-side API calls only.",
    ),
    _secret(
        "Stripe Test Key",
        r"sk_test_[a-zA-Z0-9]{24,}",
        "high",
        "Even test keys should not be exposed in client-side code.",
    ),
    _secret(
        "AWS Access Key",
        r"AKIA[0-9A-Z]{16}",
        "critical",
        "AWS access keys must be server-side only. Use IAM roles or server-side SDK.",
    ),
    _secret(
        "AWS Secret Key",
        r"[a-zA-Z0-9/+=]{40}(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9])",
        "critical",
        "AWS secret keys are extremely sensitive. Rotate immediately if exposed.",
    ),
    _secret(
        "Supabase Service Role Key",
        r"eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9\.[a-zA-Z0-9_-]+\.[a-zA-Z0-9_-]+",
        "critical",
        "Supabase service role keys bypass RLS. Must be server-side only.",
    ),
    _secret(
        "Firebase API Key",
        r"AIza[0-9A-Za-z_-]{35}",
        "medium",
        "Firebase API keys in client code should have domain restrictions configured.",
    ),
    _secret(
        "Google Cloud API Key",
        r"AIza[0-9A-Za-z_-]{35}",
        "medium",
        "Add API key restrictions in Google Cloud Console.",
    ),
    _secret(
        "GitHub Token",
        r"gh[pousr]_[A-Za-z0-9_]{36,}",
        "critical",
        "GitHub tokens grant repository access. Revoke and regenerate immediately.",
    ),
    _secret(
        "GitHub Personal Access Token (Classic)",
        r"ghp_[a-zA-Z0-9]{36}",
        "critical",
        "GitHub PATs should never be in client code. Use server-side OAuth.",
    ),
    _secret(
        "Slack Token",
        r"xox[baprs]-[0-9]{10,13}-[0-9]{10,13}[a-zA-Z0-9-]*",
        "high",
        "Slack tokens grant workspace access. Rotate immediately.",
    ),
    _secret(
        "Twilio API Key",
        r"SK[a-f0-9]{32}",
        "high",
        "Twilio keys should be server-side only to prevent abuse.",
    ),
    _secret(
        "SendGrid API Key",
        r"SG\.[a-zA-Z0-9_-]{22}\.[a-zA-Z0-9_-]{43}",
        "high",
        "SendGrid keys allow email sending. Must be server-side only.",
    ),
    _secret(
        "Mailchimp API Key",
        r"[a-f0-9]{32}-us[0-9]{1,2}",
        "high",
        "Mailchimp API keys should be server-side only.",
    ),
    _secret(
        "Anthropic API Key",
        r"sk-ant-[a-zA-Z0-9_-]{80,}",
        "critical",
        "Anthropic API keys should be server-side only.",
    ),
    _secret(
        "Discord Bot Token",
        r"[MN][A-Za-z\d]{23,}\.[\w-]{6}\.[\w-]{27}",
        "critical",
        "Discord bot tokens grant full bot access. Regenerate immediately.",
    ),
    _secret(
        "Heroku API Key",
        r"[h|H][e|E][r|R][o|O][k|K][u|U].{0,30}"
        r"[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}",
        "high",
        "Heroku API keys should be server-side environment variables.",
        ignore_case=True,
    ),
    _secret(
        "Private Key",
        r"-----BEGIN (RSA |EC |DSA |OPENSSH )?PRIVATE KEY-----",
        "critical",
        "Private keys must never be in client-side code. Store securely on server.",
    ),
    _secret(
        "Database Connection String",
        r"(mongodb(\+srv)?|postgres(ql)?|mysql|redis)://[^\s\"']+",
        "critical",
        "Database connection strings contain credentials. Server-side only.",
        ignore_case=True,
    ),
)

# Lower-cased substrings that mark a match as sample or placeholder data.
FALSE_POSITIVE_MARKERS: tuple[str, ...] = (
    "example",
    "placeholder",
    "your-api-key",
    "xxx",
    "yyy",
    "zzz",
    "test",
    "demo",
    "sample",
    "fake",
    "dummy",
    "mock",
)

MIN_SECRET_LENGTH = 15
