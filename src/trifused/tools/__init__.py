"""Network tooling shared by the scanners."""
