"""Catalog of well-known sensitive paths, in probe priority order."""

from dataclasses import asdict, dataclass

from .models import Severity


@dataclass(frozen=True)
class ExposedPathEntry:
    path: str
    type: str
    severity: Severity
    description: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


EXPOSED_FILE_PATHS: tuple[ExposedPathEntry, ...] = (
    ExposedPathEntry("/.env", "Environment File", "critical", "Environment variables file exposed"),
    ExposedPathEntry("/.env.local", "Environment File", "critical", "Local environment file exposed"),
    ExposedPathEntry(
        "/.env.production", "Environment File", "critical", "Production environment file exposed"
    ),
    ExposedPathEntry(
        "/.env.development", "Environment File", "high", "Development environment file exposed"
    ),
    ExposedPathEntry(
        "/.git/config", "Git Config", "high", "Git configuration exposed - may contain credentials"
    ),
    ExposedPathEntry(
        "/.git/HEAD", "Git Directory", "medium", "Git directory exposed - repository structure visible"
    ),
    ExposedPathEntry("/.gitconfig", "Git Config", "medium", "Git user configuration exposed"),
    ExposedPathEntry(
        "/config.json", "Config File", "high", "Configuration file may contain sensitive data"
    ),
    ExposedPathEntry(
        "/config.yml", "Config File", "high", "Configuration file may contain sensitive data"
    ),
    ExposedPathEntry(
        "/config.yaml", "Config File", "high", "Configuration file may contain sensitive data"
    ),
    ExposedPathEntry("/.htpasswd", "Password File", "critical", "Apache password file exposed"),
    ExposedPathEntry(
        "/wp-config.php",
        "WordPress Config",
        "critical",
        "WordPress configuration with database credentials",
    ),
    ExposedPathEntry("/phpinfo.php", "PHP Info", "medium", "PHP configuration exposed"),
    ExposedPathEntry("/server-status", "Server Status", "medium", "Apache server status page exposed"),
    ExposedPathEntry("/.DS_Store", "macOS Metadata", "low", "macOS directory metadata exposed"),
    ExposedPathEntry("/Thumbs.db", "Windows Metadata", "low", "Windows thumbnail cache exposed"),
    ExposedPathEntry("/.idea/", "IDE Config", "low", "JetBrains IDE configuration exposed"),
    ExposedPathEntry("/.vscode/settings.json", "IDE Config", "low", "VS Code settings exposed"),
    ExposedPathEntry(
        "/package-lock.json",
        "Dependency Lock",
        "low",
        "NPM dependency versions exposed (useful for targeting known vulnerabilities)",
    ),
    ExposedPathEntry(
        "/composer.lock", "Dependency Lock", "low", "Composer dependency versions exposed"
    ),
    ExposedPathEntry(
        "/debug.log", "Log File", "high", "Debug log may contain sensitive information"
    ),
    ExposedPathEntry(
        "/error.log", "Log File", "high", "Error log may contain sensitive information"
    ),
    ExposedPathEntry("/access.log", "Log File", "medium", "Access log exposed"),
    ExposedPathEntry(
        "/.aws/credentials", "AWS Credentials", "critical", "AWS credentials file exposed"
    ),
    ExposedPathEntry("/backup.sql", "Database Backup", "critical", "Database backup exposed"),
    ExposedPathEntry("/database.sql", "Database Backup", "critical", "Database dump exposed"),
    ExposedPathEntry("/dump.sql", "Database Backup", "critical", "Database dump exposed"),
    ExposedPathEntry("/.npmrc", "NPM Config", "high", "NPM configuration may contain auth tokens"),
    ExposedPathEntry("/.dockerenv", "Docker", "low", "Docker environment indicator"),
    ExposedPathEntry("/Dockerfile", "Docker", "low", "Dockerfile exposed - reveals build process"),
    ExposedPathEntry(
        "/docker-compose.yml",
        "Docker",
        "medium",
        "Docker compose may contain environment variables",
    ),
)

SOURCE_MAP_PATHS: tuple[str, ...] = (
    "/main.js.map",
    "/bundle.js.map",
    "/app.js.map",
    "/vendor.js.map",
    "/index.js.map",
)

SOURCE_MAP_TYPE = "Source Map"
SOURCE_MAP_DESCRIPTION = "JavaScript source map exposed - reveals original source code"
SOURCE_MAP_REMEDIATION = (
    "Remove source maps from production or configure server to block access."
)
