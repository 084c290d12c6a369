"""Lox scanner: converts source text into a flat token stream."""

from __future__ import annotations

from loxscan.errors import Reporter
from loxscan.tokens import KEYWORDS, Token, TokenType, is_alpha_numeric, is_digit

_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# ch -> (kind when followed by "=", kind otherwise)
_WITH_EQUAL = {
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


class Scanner:
    """Scan Lox source text into a list of Token objects.

    Lexical errors go to the reporter and scanning carries on, so a single
    pass reports every error in the source.
    """

    def __init__(self, source: str, reporter: Reporter) -> None:
        self._source = source
        self._reporter = reporter
        self._start = 0
        self._current = 0
        self._line = 0
        self._tokens: list[Token] = []

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list, ending in EOF."""
        while not self._at_end():
            self._start = self._current
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _peek(self) -> str:
        if self._at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self._current += 1
        return True

    def _emit(self, tt: TokenType, literal: float | str | None = None) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(tt, lexeme, literal, self._line))

    def _error(self, message: str) -> None:
        self._reporter.report(self._line, "", message)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        if ch in _SINGLE:
            self._emit(_SINGLE[ch])
            return

        if ch in _WITH_EQUAL:
            double, single = _WITH_EQUAL[ch]
            self._emit(double if self._match("=") else single)
            return

        if ch == "/":
            if self._match("/"):
                self._skip_comment()
            else:
                self._emit(TokenType.SLASH)
            return

        if ch in " \t\r":
            return

        if ch == "\n":
            self._line += 1
            return

        if ch == '"':
            self._string()
            return

        # Digits are checked before the alphanumeric branch, so "3abc" is a
        # number followed by an identifier.
        if is_digit(ch):
            self._number()
            return

        if is_alpha_numeric(ch):
            self._identifier()
            return

        self._error(f"unexpected character: {ch}")

    # ------------------------------------------------------------------
    # Sub-scans
    # ------------------------------------------------------------------

    def _skip_comment(self) -> None:
        while self._peek() != "\n" and not self._at_end():
            self._advance()

    def _string(self) -> None:
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            self._error("Unterminated string.")
            return

        self._advance()  # closing quote

        # Recorded on the closing quote's line
        self._emit(TokenType.STRING, self._source[self._start + 1 : self._current - 1])

    def _number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        # A "." only belongs to the number when a digit follows it
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        text = self._source[self._start : self._current]
        # float() takes digits from any script; literals must be ASCII
        if text.isascii():
            value = float(text)
        else:
            self._error(f"Invalid number literal: {text}")
            value = 0.0
        self._emit(TokenType.NUMBER, value)

    def _identifier(self) -> None:
        while is_alpha_numeric(self._peek()):
            self._advance()

        text = self._source[self._start : self._current]
        self._emit(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan(source: str, reporter: Reporter) -> list[Token]:
    """Convenience function: scan source text and return the token list."""
    return Scanner(source, reporter).scan_tokens()
