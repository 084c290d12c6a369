"""Token dump to a text stream, one token per line."""

from __future__ import annotations

import json
import sys
from typing import TextIO

from loxscan.tokens import Token

FORMATS = ("text", "json")


def dump_tokens(tokens: list[Token], *, file: TextIO | None = None, fmt: str = "text") -> None:
    """Print *tokens* to *file* (stdout by default) in the given format."""
    f = file if file is not None else sys.stdout
    if fmt == "json":
        for tok in tokens:
            f.write(json.dumps(_as_dict(tok), ensure_ascii=False) + "\n")
    elif fmt == "text":
        for tok in tokens:
            f.write(format_token(tok) + "\n")
    else:
        raise ValueError(f"unknown token format: {fmt}")


def format_token(tok: Token) -> str:
    literal = "nil" if tok.literal is None else repr(tok.literal)
    return f"{tok.type.name} {tok.lexeme!r} {literal} {tok.line}"


def _as_dict(tok: Token) -> dict[str, object]:
    return {
        "type": tok.type.name,
        "lexeme": tok.lexeme,
        "literal": tok.literal,
        "line": tok.line,
    }
