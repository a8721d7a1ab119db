"""Core tree-walking evaluator for sdscheme.

Dispatches special forms by head keyword, otherwise evaluates every element
of the list (operator included) and applies the head to the rest. Runtime
failures inside an application are re-raised tagged with the head's name.
There is no tail-call elimination: recursion depth is bounded by the host
stack and overflowing it raises RecursionError.
"""

from __future__ import annotations

import re

from sdscheme import SExpression, LispValue
from sdscheme.errors import SchemeApplicationError, SchemeRuntimeError
from sdscheme.evaluation.apply import apply
from sdscheme.evaluation.special_forms import SPECIAL_FORMS
from sdscheme.printer import to_string
from sdscheme.types.environment import Environment
from sdscheme.types.symbol import Symbol

STRING_LITERAL_RE = re.compile(r'^"(.*)"$|^\'(.*)\'$', re.DOTALL)


def string_literal(token: str) -> str | None:
    """Unwrap a quoted token, or None if `token` is not a string literal."""
    match = STRING_LITERAL_RE.match(token)
    if match is None:
        return None
    if match.group(1) is not None:
        return match.group(1).replace('\\"', '"')
    return match.group(2).replace("\\'", "'")


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [head, *tail_args]:
            proc = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            try:
                return apply(proc, args, env, evaluate)
            except SchemeApplicationError:
                raise
            except SchemeRuntimeError as exc:
                name = str(head) if isinstance(head, Symbol) else to_string(head)
                raise SchemeApplicationError(name, exc) from exc

        case Symbol():
            literal = string_literal(expr.id)
            if literal is not None:
                return literal
            return env.lookup(expr)

    # Numbers, booleans, the empty list, Nil and procedure values
    return expr
