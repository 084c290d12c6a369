"""Error reporting: the reporter interface and formatted lexical diagnostics."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Reporter(Protocol):
    """Anything the scanner can hand lexical errors to."""

    had_error: bool

    def report(self, line: int, where: str, message: str) -> None: ...


class LexError(Exception):
    """A lexical diagnostic with its 0-based line and source context."""

    def __init__(self, message: str, line: int, source: str, where: str = "") -> None:
        self.message = message
        self.line = line
        self.where = where
        self.source = source
        super().__init__(self.short())

    def short(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"

    def format(self, filename: str = "input.lox") -> str:
        lines = self.source.split("\n")

        # Lines past the end of the source have no text to show
        if 0 <= self.line < len(lines):
            source_line = lines[self.line].rstrip("\r")
        else:
            source_line = ""

        stripped = source_line.lstrip(" \t")
        pad = source_line[: len(source_line) - len(stripped)]
        carets = "^" * max(1, len(stripped.rstrip()))

        line_num = str(self.line + 1)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line + 1}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class StreamReporter:
    """Write each report to a text stream as it arrives."""

    def __init__(
        self,
        source: str = "",
        filename: str = "input.lox",
        *,
        stream: TextIO | None = None,
        verbose: bool = False,
    ) -> None:
        self.source = source
        self.filename = filename
        self.stream = stream if stream is not None else sys.stderr
        self.verbose = verbose
        self.had_error = False

    def report(self, line: int, where: str, message: str) -> None:
        err = LexError(message, line, self.source, where)
        text = err.format(self.filename) if self.verbose else err.short()
        print(text, file=self.stream)
        self.had_error = True


class CollectingReporter:
    """Keep every report as a LexError, in the order reported."""

    def __init__(self, source: str = "") -> None:
        self.source = source
        self.errors: list[LexError] = []
        self.had_error = False

    def report(self, line: int, where: str, message: str) -> None:
        self.errors.append(LexError(message, line, self.source, where))
        self.had_error = True

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]
