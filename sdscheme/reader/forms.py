"""Split program text into independent top-level forms.

Full-line `;;` comments and blank lines are dropped, inline comments are cut at
the marker, and the remaining lines are joined with spaces. The joined text is
then scanned with parenthesis depth tracking: every balanced `( ... )` and every
bare token outside parentheses becomes one form, in source order.
"""

from __future__ import annotations

from sdscheme.config import COMMENT_MARKER


def strip_comments(text: str, marker: str = COMMENT_MARKER) -> str:
    cleaned: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(marker):
            continue
        idx = stripped.find(marker)
        if idx != -1:
            stripped = stripped[:idx].strip()
        cleaned.append(stripped)
    return " ".join(cleaned).strip()


def extract_expressions(text: str, marker: str = COMMENT_MARKER) -> list[str]:
    source = strip_comments(text, marker)
    forms: list[str] = []
    current: list[str] = []
    depth = 0
    quote_char: str | None = None
    esc = False

    def _flush() -> None:
        form = "".join(current).strip()
        if form:
            forms.append(form)
        current.clear()

    for ch in source:
        if esc:
            # Character after a backslash inside a string is literal
            esc = False
            current.append(ch)
        elif quote_char is not None:
            if ch == "\\":
                esc = True
            elif ch == quote_char:
                quote_char = None
            current.append(ch)
        elif ch in "\"'":
            quote_char = ch
            current.append(ch)
        elif ch == "(":
            if depth == 0:
                # A bare token directly before the paren is its own form
                _flush()
            depth += 1
            current.append(ch)
        elif ch == ")":
            current.append(ch)
            # A stray close paren is flushed as its own (malformed) form
            if depth > 0:
                depth -= 1
            if depth == 0:
                _flush()
        elif depth == 0 and ch in " \t":
            _flush()
        else:
            current.append(ch)

    # An unterminated form is dropped
    if depth == 0:
        _flush()
    return forms
