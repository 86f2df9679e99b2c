"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "hashfiles"
CLI_DESCRIPTION: str = "Generate a single hash over the contents of multiple files."
CLI_EPILOG: str = "\n".join(
    (
        "examples:",
        "  hashfiles",
        '  hashfiles -a sha-256 -f "src/**/*.py"',
        "  hashfiles --sync --no-glob file1.txt file2.txt",
    )
)
ERROR_PREFIX: str = "Error"
