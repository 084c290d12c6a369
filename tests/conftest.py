"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from loxscan.errors import CollectingReporter
from loxscan.scanner import scan
from loxscan.tokens import Token, TokenType


@pytest.fixture
def reporter() -> CollectingReporter:
    return CollectingReporter()


@pytest.fixture
def scan_all(reporter):
    """Return a helper that scans source and returns every token, EOF included."""

    def _scan(source: str) -> list[Token]:
        reporter.source = source
        return scan(source, reporter)

    return _scan


@pytest.fixture
def lex(scan_all):
    """Return a helper that scans source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = scan_all(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lines(tokens: list[Token], expected: list[int]) -> None:
    """Assert that the token line numbers match the expected list."""
    actual = [t.line for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
