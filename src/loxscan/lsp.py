"""Minimal LSP server for Lox: lexical diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from loxscan import __version__
from loxscan.errors import CollectingReporter, LexError
from loxscan.scanner import scan

server = LanguageServer("loxscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _line_range(source_lines: list[str], line: int) -> Range:
    """Cover the whole reported line; the scanner reports lines, not columns."""
    width = len(source_lines[line].rstrip("\r")) if 0 <= line < len(source_lines) else 0
    return Range(
        start=Position(line=line, character=0),
        end=Position(line=line, character=width),
    )


def _to_diagnostic(err: LexError, source_lines: list[str]) -> Diagnostic:
    return Diagnostic(
        range=_line_range(source_lines, err.line),
        message=err.message,
        severity=DiagnosticSeverity.Error,
        source="loxscan",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per lexical error."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    reporter = CollectingReporter(source)
    scan(source, reporter)

    source_lines = source.split("\n")
    diagnostics = [_to_diagnostic(err, source_lines) for err in reporter.errors]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
