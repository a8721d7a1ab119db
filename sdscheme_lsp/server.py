from __future__ import annotations

"""
A minimal pygls-based Language Server for sdscheme.

Features:
- Text synchronization and document store
- Diagnostics: unmatched parens, unmatched quotes, reader errors per form
- Hover: builtin signatures and locally defined symbols
- Completion: special forms, global bindings, document defines
- Command `sdscheme.run`: evaluate a document, log `Scheme => <value>`

Unlike diagnostics, which are static, `sdscheme.run` evaluates the buffer in a
session Interpreter so definitions persist between runs.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    CompletionList,
    CompletionParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
)

from sdscheme import __version__
from sdscheme.config import configure_logging
from sdscheme.interpreter import Interpreter
from sdscheme_lsp.features import (
    build_diagnostics,
    completion_items,
    extract_word_at,
    hover_text,
    run_document,
)
from sdscheme_lsp.indexer import build_index, DocumentIndex

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class SchemeLanguageServer(LanguageServer):
    CMD_NAME = "sdscheme-ls"
    CMD_RUN = "sdscheme.run"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, DocumentState] = {}
        self.interpreter = Interpreter()


ls = SchemeLanguageServer()


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    ls.publish_diagnostics(uri, build_diagnostics(text, idx))


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    _update(params.text_document.uri, params.text_document.text or "")


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents.get(uri, DocumentState("", build_index(""))).text
    _update(uri, text)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Hover ---
@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    word = extract_word_at(state.text, params.position)
    if not word:
        return None
    contents = hover_text(word, ls.interpreter, state.index)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature("textDocument/completion")
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    index = state.index if state else DocumentIndex()
    return CompletionList(is_incomplete=False, items=completion_items(ls.interpreter, index))


# --- Run command ---
@ls.command(SchemeLanguageServer.CMD_RUN)
def run(args) -> Optional[str]:
    if not args:
        ls.show_message_log("sdscheme.run: no document given")
        return None
    uri = args[0]
    state = ls.documents.get(uri)
    if state is None:
        ls.show_message_log(f"sdscheme.run: document not open: {uri}")
        return None
    logger.info("running %s", uri)
    lines = run_document(ls.interpreter, state.text, uri)
    for line in lines:
        ls.show_message_log(line)
    return lines[-1] if lines else None


def main() -> None:
    configure_logging()
    ls.start_io()


if __name__ == "__main__":
    # Run the language server over stdio
    main()
