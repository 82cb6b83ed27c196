from __future__ import annotations

"""
A minimal pygls-based Language Server for artlang.

Features:
- Text synchronization and document store
- Diagnostics: parse errors, and evaluation errors per top-level expression
- Hover: builtin signatures
- Completion: builtins plus `width`/`height`
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TextDocumentSyncKind,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    Diagnostic,
    Position,
    Hover,
    MarkupContent,
    MarkupKind,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    HoverParams,
)

from artlang.evaluation.builtins import SIGNATURES
from artlang_lsp.diagnostics import build_diagnostics

logger = logging.getLogger(__name__)

ROOT_SYMBOLS = {
    "width": "width: canvas width in pixels",
    "height": "height: canvas height in pixels",
    "true": "true: boolean literal",
    "false": "false: boolean literal",
}


@dataclass
class DocumentState:
    text: str
    diagnostics: List[Diagnostic]


class ArtlangLanguageServer(LanguageServer):
    CMD_NAME = "artlang-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.1", text_document_sync_kind=TextDocumentSyncKind.Full)
        self.documents: Dict[str, DocumentState] = {}


ls = ArtlangLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(uri, params.text_document.text or "")


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(uri, text)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    if uri in ls.documents:
        del ls.documents[uri]
    ls.publish_diagnostics(uri, [])


def _update(uri: str, text: str) -> None:
    diags = build_diagnostics(text)
    ls.documents[uri] = DocumentState(text=text, diagnostics=diags)
    logger.debug("%s: %d diagnostic(s)", uri, len(diags))
    ls.publish_diagnostics(uri, diags)


# --- Hover ---
@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = extract_word_at(state.text, params.position)
    contents = hover_text(word) if word else None
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


def hover_text(word: str) -> Optional[str]:
    if word in SIGNATURES:
        return SIGNATURES[word]
    return ROOT_SYMBOLS.get(word)


# --- Completion ---
@ls.feature("textDocument/completion")
def on_completion(params: CompletionParams) -> CompletionList:
    return CompletionList(is_incomplete=False, items=completion_items())


def completion_items() -> List[CompletionItem]:
    items = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in SIGNATURES.items()
    ]
    items.extend(
        CompletionItem(label=name, kind=CompletionItemKind.Variable, detail=doc)
        for name, doc in ROOT_SYMBOLS.items()
    )
    return items


# --- Helpers ---

def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in ' \t()"\n\r':
        start -= 1
    end = min(pos.character, len(line))
    while end < len(line) and line[end] not in ' \t()"\n\r':
        end += 1
    word = line[start:end]
    return word or None


if __name__ == "__main__":
    ls.start_io()
