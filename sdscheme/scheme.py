"""Host-facing entry points.

The editor integration and batch runner talk to the interpreter only through
these functions. They share one process-wide Interpreter, created on first
use, so definitions persist between calls.
"""

from __future__ import annotations

from typing import Mapping, Optional

from sdscheme import LispValue
from sdscheme.builtin.env_builtin import make_global_environment
from sdscheme.display import DisplaySink
from sdscheme.interpreter import Interpreter

__all__ = [
    "evaluate",
    "set_display_output",
    "get_environment",
    "make_global_environment",
    "get_interpreter",
    "reset",
]

_interpreter: Optional[Interpreter] = None


def get_interpreter() -> Interpreter:
    global _interpreter
    if _interpreter is None:
        _interpreter = Interpreter()
    return _interpreter


def reset() -> None:
    """Discard the shared interpreter; the next call starts from fresh builtins."""
    global _interpreter
    _interpreter = None


def evaluate(source: str) -> LispValue:
    """Evaluate `source` in the shared global environment.

    Raises a SchemeError subclass on any lexing, parsing or evaluation failure.
    """
    return get_interpreter().eval(source)


def set_display_output(sink: Optional[DisplaySink]) -> None:
    get_interpreter().set_display_output(sink)


def get_environment() -> Mapping[str, LispValue]:
    return get_interpreter().environment()
