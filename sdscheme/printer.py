"""Render Scheme values as text.

`to_string` is the user-facing form used by the REPL-style outputs, the batch
runner logs and `display`. `canonical` is the serialized form that `equal?`
compares: two values are structurally equal iff their canonical forms match.
"""

from __future__ import annotations

import json
import math

from sdscheme import LispValue
from sdscheme.types.nil import NilType
from sdscheme.types.procedure import Builtin, Closure
from sdscheme.types.symbol import Symbol


def format_number(x: float | int) -> str:
    if isinstance(x, float) and x.is_integer() and not math.isinf(x):
        return str(int(x))
    return repr(x)


def to_string(value: LispValue, readable: bool = True) -> str:
    """Printable form; strings are quoted only when `readable` is set."""
    if isinstance(value, NilType) or value is None:
        return "null"
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False) if readable else value
    if isinstance(value, list):
        return "(" + " ".join(to_string(v, readable) for v in value) + ")"
    if isinstance(value, Closure):
        return str(value)
    if isinstance(value, Builtin):
        return f"#<procedure {value.name}>"
    return str(value)


def canonical(value: LispValue) -> str:
    if isinstance(value, NilType) or value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (str, Symbol)):
        return json.dumps(str(value))
    if isinstance(value, list):
        return "[" + ",".join(canonical(v) for v in value) + "]"
    # Procedures have no structure to compare; only the same object matches
    return f"#<{type(value).__name__}@{id(value):x}>"
