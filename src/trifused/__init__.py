"""TriFused security scanning core."""

__all__ = ["app", "main", "run_security_scan"]


def __getattr__(name: str):
    if name in ("app", "main"):
        from trifused.cli import app, main

        return {"app": app, "main": main}[name]
    if name == "run_security_scan":
        from trifused.modules.security import run_security_scan

        return run_security_scan
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(__all__)
