"""
Status-line output for the command-line tool.

Lines carry a glyph prefix: → for a step, ✓ for success, ⚠ for a warning
and ✗ for a failure. Failures go to stderr.
"""

from __future__ import annotations

import sys

_quiet = False


def set_quiet(quiet: bool) -> None:
    """Suppress step lines; success, warning and failure lines still print."""
    global _quiet
    _quiet = quiet


def step(message: str) -> None:
    if not _quiet:
        print(f"→ {message}")


def success(message: str) -> None:
    print(f"✓ {message}")


def warn(message: str) -> None:
    print(f"⚠ {message}")


def fail(message: str) -> None:
    print(f"✗ {message}", file=sys.stderr)
