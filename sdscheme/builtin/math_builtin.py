"""Real-valued math procedures and constants.

Every single-argument function below is exposed as a unary Builtin under its
Python `math` name, plus the `abs`, `round` and `sign` helpers.
"""
from __future__ import annotations

import math
from typing import Callable

from sdscheme import LispValue
from sdscheme.builtin.checks import require_number
from sdscheme.types.environment import Environment
from sdscheme.types.procedure import Builtin
from sdscheme.types.symbol import Symbol

UNARY_MATH_NAMES = (
    "acos", "acosh", "asin", "asinh", "atan", "atanh",
    "ceil", "cos", "cosh", "exp", "expm1", "fabs", "floor",
    "log", "log10", "log1p", "log2", "sin", "sinh", "sqrt",
    "tan", "tanh", "trunc", "degrees", "radians",
)


def _sign(x: float) -> float:
    return (x > 0) - (x < 0)


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def _round(x: float) -> float:
    # Round half up like Math.round, not banker's rounding
    return math.floor(x + 0.5)


EXTRA_UNARY: dict[str, Callable[[float], float]] = {
    "abs": abs,
    "round": _round,
    "sign": _sign,
    "cbrt": _cbrt,
}


def unary(name: str, fn: Callable[[float], float]) -> Builtin:
    def call(env: Environment, args: list[LispValue]) -> float:
        return float(fn(require_number(args[0])))

    return Builtin(name, call, 1, 1)


def register(env: Environment) -> None:
    """Register the unary math builtins and the `pi`/`e` constants."""
    for name in UNARY_MATH_NAMES:
        env.define(Symbol(name), unary(name, getattr(math, name)))
    for name, fn in EXTRA_UNARY.items():
        env.define(Symbol(name), unary(name, fn))
    env.define(Symbol("pi"), math.pi)
    env.define(Symbol("e"), math.e)
