from __future__ import annotations

"""
Lightweight indexer for sdscheme files without evaluating code.

We scan the raw text for:
- definitions: (define name ...) and (define (name params...) ...)
- parenthesis balance and unterminated double-quoted strings

The scanner is tolerant of partial buffers; it only extracts enough structure
for document symbols, hover, completion and diagnostics.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple
import re

TOKEN_REGEX = re.compile(
    r"\s+|;.*$|\(|\)|\"(?:\\.|[^\"])*\"|[^\s()]+",
    re.MULTILINE,
)


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    has_unmatched_quote: bool = False


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace() or tok.startswith(';'):
            continue
        yield tok, m.start(), m.end()


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    for i, (tok, start, end) in enumerate(tokens):
        if tok == ')':
            idx.paren_balance -= 1
            continue
        if tok != '(':
            continue
        idx.paren_balance += 1
        if i + 2 >= len(tokens) or tokens[i + 1][0] != "define":
            continue
        # (define name ...) or (define (name ...) ...)
        name_tok, name_start, _ = tokens[i + 2]
        kind = 'var'
        if name_tok == '(' and i + 3 < len(tokens):
            name_tok, name_start, _ = tokens[i + 3]
            kind = 'function'
        if name_tok in ('(', ')') or name_tok.startswith('"'):
            continue
        line, col = _position_from_offset(text, name_start)
        idx.symbols[name_tok] = SymbolDef(name=name_tok, kind=kind, line=line, col=col)

    # unmatched quote detection: toggle on unescaped quotes outside comments
    quote_open = False
    for raw_line in text.splitlines():
        esc = False
        for ch in raw_line:
            if esc:
                esc = False
                continue
            if ch == '\\':
                esc = True
            elif ch == ';' and not quote_open:
                break
            elif ch == '"':
                quote_open = not quote_open
    idx.has_unmatched_quote = quote_open

    return idx


# Signatures for hover without evaluation
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ x ...)",
    "-": "(- x y ...)",
    "*": "(* x ...)",
    "/": "(/ x y ...)",
    "remainder": "(remainder x y)",
    "modulo": "(modulo x y)",
    "=": "(= a b)",
    "equal?": "(equal? a b)",
    "eq?": "(eq? a b)",
    "not": "(not x)",
    "or": "(or x ...)",
    "and": "(and x ...)",
    "list": "(list x ...)",
    "cons": "(cons x xs)",
    "car": "(car xs)",
    "cdr": "(cdr xs)",
    "append": "(append xs ...)",
    "reverse": "(reverse xs)",
    "length": "(length xs)",
    "map": "(map f xs ...)",
    "filter": "(filter pred xs)",
    "fold": "(fold f init xs)",
    "reduce": "(reduce f init xs)",
    "apply": "(apply f args)",
    "display": "(display x)",
}
