"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenType(Enum):
    # Single-character punctuation
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    STAR = auto()  # *
    SLASH = auto()  # /

    # One or two character operators
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=

    # Literals
    STRING = auto()  # "...", literal is the inner text
    NUMBER = auto()  # digits, optional fraction, literal is a float
    IDENTIFIER = auto()  # letters/digits, not a keyword

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token: kind, source text, decoded value, 0-based line."""

    type: TokenType
    lexeme: str
    literal: float | str | None
    line: int


KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)


def is_digit(ch: str) -> bool:
    """Return True if ch is a decimal digit in any script."""
    return ch.isdecimal()


def is_alpha_numeric(ch: str) -> bool:
    """Return True if ch is a letter or a decimal digit."""
    return ch.isalpha() or ch.isdecimal()
