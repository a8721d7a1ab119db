"""
  Reader / Parser

Consumes a token list destructively from the front and builds one expression:

    - ( ... )        -> Python list
    - #t / #true     -> True
    - #f / #false    -> False
    - numeric tokens -> float
    - anything else  -> Symbol (quoted string tokens keep their quotes and are
                        unwrapped by the evaluator)
"""

from __future__ import annotations

import math
import re
from typing import Iterator, MutableSequence

from sdscheme import SExpression
from sdscheme.errors import SchemeSyntaxError
from sdscheme.reader.lexer import tokenize
from sdscheme.types.symbol import Symbol

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#true": True,
    "#f": False,
    "#false": False,
}

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def atom(token: str) -> SExpression:
    """Convert a non-paren token to a boolean, number or Symbol."""
    if token in BOOLEANS:
        return BOOLEANS[token]
    if NUMBER_RE.fullmatch(token):
        value = float(token)
        if not math.isnan(value):
            return value
    return Symbol(token)


def parse(tokens: MutableSequence[str]) -> SExpression:
    """Parse one expression, removing its tokens from the front of `tokens`."""
    if not tokens:
        raise SchemeSyntaxError("unexpected EOF")
    token = tokens.pop(0)
    if token == "(":
        items: list[SExpression] = []
        while True:
            if not tokens:
                raise SchemeSyntaxError("unexpected EOF")
            if tokens[0] == ")":
                tokens.pop(0)
                return items
            items.append(parse(tokens))
    if token == ")":
        raise SchemeSyntaxError("unexpected close paren")
    return atom(token)


def parse_all(tokens: MutableSequence[str]) -> Iterator[SExpression]:
    """Yield top-level expressions until `tokens` is exhausted."""
    while tokens:
        yield parse(tokens)


def read(text: str) -> list[SExpression]:
    """Tokenize and parse every top-level expression in `text`."""
    return list(parse_all(tokenize(text)))
