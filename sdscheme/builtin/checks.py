"""Argument checks shared by the builtins; failures are SchemeRuntimeErrors.

Messages leave out the procedure name: the evaluator tags the error with the
head of the failing application.
"""
from __future__ import annotations

from sdscheme import LispValue
from sdscheme.errors import SchemeRuntimeError
from sdscheme.printer import to_string
from sdscheme.types.procedure import Builtin, Closure


def is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def require_number(x: LispValue) -> float:
    if not is_number(x):
        raise SchemeRuntimeError(f"expected a number, got {to_string(x)}")
    return x


def require_numbers(xs: list[LispValue]) -> list[float]:
    return [require_number(x) for x in xs]


def require_list(x: LispValue) -> list:
    if not isinstance(x, list):
        raise SchemeRuntimeError(f"expected a list, got {to_string(x)}")
    return x


def require_procedure(x: LispValue) -> Builtin | Closure:
    if not isinstance(x, (Builtin, Closure)):
        raise SchemeRuntimeError(f"expected a procedure, got {to_string(x)}")
    return x
