"""
  Lexer

Splits source text into string tokens: "(", ")", quoted string literals
(kept verbatim, quotes included) and bare words.

String literals are swapped for placeholders before the structural split so
that parentheses and whitespace inside them survive, then restored.
"""

from __future__ import annotations

import re

# "..." or '...', with backslash-escaped characters inside
STRING_RE = re.compile(r'"(?:\\.|[^"\\])*"|\'(?:\\.|[^\'\\])*\'', re.DOTALL)
PAREN_RE = re.compile(r"([()])")
WHITESPACE_RE = re.compile(r"\s+")

_PLACEHOLDER = "\x00{}\x00"
PLACEHOLDER_RE = re.compile("\x00(\\d+)\x00")


def tokenize(text: str) -> list[str]:
    """Return the token sequence for `text`; empty input gives []."""
    literals: list[str] = []

    def _protect(match: re.Match) -> str:
        literals.append(match.group(0))
        return _PLACEHOLDER.format(len(literals) - 1)

    protected = STRING_RE.sub(_protect, text)
    spaced = PAREN_RE.sub(r" \1 ", protected)
    collapsed = WHITESPACE_RE.sub(" ", spaced).strip()
    if not collapsed:
        return []

    def _restore(match: re.Match) -> str:
        return literals[int(match.group(1))]

    return [PLACEHOLDER_RE.sub(_restore, tok) for tok in collapsed.split(" ")]
