"""Console messages for supertable.

Everything goes to stderr: in filter mode stdout carries the document.
"""

from __future__ import annotations

import sys
from typing import Callable

Trace = Callable[[str], None]


def print_info(message: str) -> None:
    """Print info message."""
    print(f"[INFO] {message}", file=sys.stderr)


def print_warn(message: str) -> None:
    """Print warning message."""
    print(f"[WARN] {message}", file=sys.stderr)


def print_error(message: str) -> None:
    """Print error message."""
    print(f"[ERROR] {message}", file=sys.stderr)


def print_trace(message: str) -> None:
    """Print trace message."""
    print(f"[TRACE] {message}", file=sys.stderr)


def null_trace(message: str) -> None:
    """Discard trace message."""
