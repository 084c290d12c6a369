"""Lox lexical scanner."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxscan.errors import Reporter
    from loxscan.tokens import Token

__version__ = "0.1.0"


def scan(source: str, reporter: Reporter | None = None) -> list[Token]:
    """Scan Lox source into tokens, reporting errors to stderr by default."""
    from loxscan.errors import StreamReporter
    from loxscan.scanner import scan as _scan

    if reporter is None:
        reporter = StreamReporter(source)
    return _scan(source, reporter)
