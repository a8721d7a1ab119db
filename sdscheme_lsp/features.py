"""Language feature computations used by the server.

Kept free of server state so each feature is a plain function of the
document text, its index and the session Interpreter.
"""

from __future__ import annotations

from typing import List, Optional

from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
)

from sdscheme.errors import SchemeError
from sdscheme.evaluation.special_forms import SPECIAL_FORMS
from sdscheme.interpreter import Interpreter
from sdscheme.printer import to_string
from sdscheme.reader.forms import extract_expressions
from sdscheme.reader.lexer import tokenize
from sdscheme.reader.parser import parse_all
from sdscheme.runner import run_source
from sdscheme.types.procedure import is_procedure
from sdscheme_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex

SOURCE = "sdscheme-ls"


def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def syntax_errors(text: str) -> List[str]:
    """Reader errors for each top-level form of `text`."""
    errors = []
    for form in extract_expressions(text):
        try:
            list(parse_all(tokenize(form)))
        except SchemeError as exc:
            errors.append(f"{exc}: {form}")
    return errors


def build_diagnostics(text: str, idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []

    if idx.paren_balance != 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched parentheses detected",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )

    if idx.has_unmatched_quote:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched quote detected",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )

    for message in syntax_errors(text):
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message=message,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )
    return diags


def completion_items(interp: Interpreter, idx: DocumentIndex) -> List[CompletionItem]:
    items: List[CompletionItem] = []
    seen = set()

    for keyword in SPECIAL_FORMS:
        name = str(keyword)
        seen.add(name)
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword))

    for name, value in sorted(interp.environment().items()):
        if name in seen:
            continue
        seen.add(name)
        if is_procedure(value):
            items.append(
                CompletionItem(label=name, kind=CompletionItemKind.Function, detail=BUILTIN_SIGNATURES.get(name))
            )
        else:
            items.append(CompletionItem(label=name, kind=CompletionItemKind.Constant, detail=to_string(value)))

    for name, sdef in idx.symbols.items():
        if name in seen:
            continue
        kind = CompletionItemKind.Function if sdef.kind == 'function' else CompletionItemKind.Variable
        items.append(CompletionItem(label=name, kind=kind))

    return items


def hover_text(word: str, interp: Interpreter, idx: DocumentIndex) -> Optional[str]:
    if word in idx.symbols:
        sdef = idx.symbols[word]
        return f"{word} — {sdef.kind} (defined at {sdef.line+1}:{sdef.col+1})"
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    env = interp.environment()
    if word in env:
        value = env[word]
        return f"{word} — builtin procedure" if is_procedure(value) else f"{word} = {to_string(value)}"
    return None


def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = end = pos.character
    while start > 0 and line[start - 1] not in " \t()\n\r":
        start -= 1
    while end < len(line) and line[end] not in " \t()\n\r":
        end += 1
    return line[start:end] or None


def run_document(interp: Interpreter, text: str, name: str = "<document>") -> List[str]:
    """Evaluate `text` and return the lines to write to the output channel."""
    result = run_source(interp, text, name)
    lines: List[str] = []
    last = None
    for entry in result.expressions:
        lines.extend(f"[display] {out}" for out in entry.display_output)
        if entry.error is not None:
            lines.append(f"Scheme error: {entry.error}")
        else:
            last = entry
    if last is not None:
        lines.append(f"Scheme => {to_string(last.output)}")
    return lines
