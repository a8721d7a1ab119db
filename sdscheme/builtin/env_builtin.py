"""Built-in procedures for the sdscheme global environment.

This module defines arithmetic, comparison, logic, list processing,
higher-order helpers and the `display` side channel, plus `register`, which
installs them all into an Environment.

Every builtin is a plain function `(env, args) -> value` wrapped in a Builtin
that checks the declared arity before the call.
"""
from __future__ import annotations

import math
from typing import Callable

from sdscheme import LispValue
from sdscheme.builtin import math_builtin
from sdscheme.builtin.checks import (
    is_number,
    require_list,
    require_numbers,
    require_procedure,
)
from sdscheme.display import DisplayChannel
from sdscheme.errors import SchemeRuntimeError
from sdscheme.evaluation.apply import apply as apply_engine
from sdscheme.evaluation.evaluator import evaluate
from sdscheme.printer import canonical, to_string
from sdscheme.types.environment import Environment
from sdscheme.types.nil import Nil, NilType, is_truthy
from sdscheme.types.procedure import Builtin, Closure
from sdscheme.types.symbol import Symbol


def _call(env: Environment, fn: LispValue, args: list[LispValue]) -> LispValue:
    """Invoke a Scheme procedure from inside a builtin."""
    return apply_engine(fn, args, env, evaluate)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> float:
    """Sum of all arguments; 0 with none."""
    return float(sum(require_numbers(expr)))


def sub(env: Environment, expr: list[LispValue]) -> float:
    """Negation with one argument, otherwise left-to-right subtraction."""
    nums = require_numbers(expr)
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


def mul(env: Environment, expr: list[LispValue]) -> float:
    """Product of all arguments; 1 with none."""
    result = 1.0
    for x in require_numbers(expr):
        result *= x
    return result


def div(env: Environment, expr: list[LispValue]) -> float:
    """Reciprocal with one argument, otherwise left-to-right division."""
    nums = require_numbers(expr)
    try:
        if len(nums) == 1:
            return 1 / nums[0]
        result = nums[0]
        for x in nums[1:]:
            result /= x
        return result
    except ZeroDivisionError:
        raise SchemeRuntimeError("division by zero") from None


def remainder(env: Environment, expr: list[LispValue]) -> float:
    """Truncating remainder: the result takes the sign of the dividend."""
    x, y = require_numbers(expr)
    if y == 0:
        raise SchemeRuntimeError("division by zero")
    return math.fmod(x, y)


def modulo(env: Environment, expr: list[LispValue]) -> float:
    """Floored modulo: the result takes the sign of the divisor."""
    x, y = require_numbers(expr)
    if y == 0:
        raise SchemeRuntimeError("division by zero")
    return math.fmod(math.fmod(x, y) + y, y)


def maximum(env: Environment, expr: list[LispValue]) -> float:
    return float(max(require_numbers(expr)))


def minimum(env: Environment, expr: list[LispValue]) -> float:
    return float(min(require_numbers(expr)))


def expt(env: Environment, expr: list[LispValue]) -> float:
    base, power = require_numbers(expr)
    return float(math.pow(base, power))


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[float, float], bool]) -> Builtin:
    def compare(env: Environment, expr: list[LispValue]) -> bool:
        a, b = require_numbers(expr)
        return op(a, b)

    return Builtin(name, compare, 2, 2)


def equals(env: Environment, expr: list[LispValue]) -> bool:
    """Structural equality: compares canonical serialized forms."""
    a, b = expr
    return canonical(a) == canonical(b)


def is_identical(a: LispValue, b: LispValue) -> bool:
    """Identity for lists and procedures, value equality for atoms."""
    if isinstance(a, list) and isinstance(b, list):
        return a is b or (not a and not b)
    if isinstance(a, (list, Builtin, Closure)) or isinstance(b, (list, Builtin, Closure)):
        return a is b
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if is_number(a) and is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def eq(env: Environment, expr: list[LispValue]) -> bool:
    a, b = expr
    return is_identical(a, b)


def logical_not(env: Environment, expr: list[LispValue]) -> bool:
    """Only Nil and #f are falsey."""
    return not is_truthy(expr[0])


# -------------------------------
# Logic
#
# `or` and `and` are procedures, not special forms: their operands are
# evaluated before the call, and the short-circuit only decides which of the
# already-computed values is returned.
# -------------------------------
def logical_or(env: Environment, expr: list[LispValue]) -> LispValue:
    """First truthy argument, else the last argument, else #f."""
    for val in expr:
        if is_truthy(val):
            return val
    return expr[-1] if expr else False


def logical_and(env: Environment, expr: list[LispValue]) -> LispValue:
    """First falsy argument, else the last argument, else #t."""
    for val in expr:
        if not is_truthy(val):
            return val
    return expr[-1] if expr else True


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    return list(expr)


def is_list(env: Environment, expr: list[LispValue]) -> bool:
    return isinstance(expr[0], list)


def is_null(env: Environment, expr: list[LispValue]) -> bool:
    """True for Nil or the empty list."""
    x = expr[0]
    return isinstance(x, NilType) or (isinstance(x, list) and not x)


def is_pair(env: Environment, expr: list[LispValue]) -> bool:
    x = expr[0]
    return isinstance(x, list) and len(x) > 0


def length(env: Environment, expr: list[LispValue]) -> float:
    x = expr[0]
    if isinstance(x, NilType):
        return 0.0
    if not isinstance(x, (list, str)):
        raise SchemeRuntimeError(f"expected a list or string, got {to_string(x)}")
    return float(len(x))


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    """First element; Nil for the empty list or Nil."""
    xs = expr[0]
    if isinstance(xs, NilType):
        return Nil
    xs = require_list(xs)
    return xs[0] if xs else Nil


def cdr(env: Environment, expr: list[LispValue]) -> LispValue:
    """
    - (cdr (list 1))   -> ()   the empty list
    - (cdr (list))     -> Nil
    - (cdr (list 1 2)) -> (2)
    """
    xs = expr[0]
    if isinstance(xs, NilType):
        return Nil
    xs = require_list(xs)
    return xs[1:] if xs else Nil


def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Prepend head to tail. A Nil tail gives (head); a non-list tail gives (head tail)."""
    head, tail = expr
    if isinstance(tail, NilType):
        return [head]
    if isinstance(tail, list):
        return [head] + tail
    return [head, tail]


def append(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Concatenate lists; Nil counts as the empty list."""
    result: list[LispValue] = []
    for item in expr:
        if isinstance(item, NilType):
            continue
        result.extend(require_list(item))
    return result


def reverse(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    if isinstance(expr[0], NilType):
        return []
    return list(reversed(require_list(expr[0])))


# -------------------------------
# Higher-order
# -------------------------------
def map_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """(map f xs ys ...) applies f across the lists, stopping at the shortest."""
    fn = require_procedure(expr[0])
    lists = [require_list(xs) for xs in expr[1:]]
    return [_call(env, fn, list(items)) for items in zip(*lists)]


def filter_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    fn = require_procedure(expr[0])
    xs = require_list(expr[1])
    return [x for x in xs if is_truthy(_call(env, fn, [x]))]


def fold(env: Environment, expr: list[LispValue]) -> LispValue:
    """(fold f init xs): left fold calling (f acc x) for each x."""
    fn = require_procedure(expr[0])
    acc = expr[1]
    for x in require_list(expr[2]):
        acc = _call(env, fn, [acc, x])
    return acc


def apply(env: Environment, expr: list[LispValue]) -> LispValue:
    """(apply f args) calls f with the elements of the list args."""
    fn = require_procedure(expr[0])
    args = expr[1]
    if isinstance(args, NilType):
        args = []
    return _call(env, fn, list(require_list(args)))


# -------------------------------
# Output
# -------------------------------
def display_builtin(channel: DisplayChannel) -> Builtin:
    def display(env: Environment, expr: list[LispValue]) -> LispValue:
        channel.write(expr[0])
        return Nil

    return Builtin("display", display, 1, 1)


BUILTINS: dict[str, tuple[Callable[[Environment, list[LispValue]], LispValue], int, int | None]] = {
    # name: (fn, min_args, max_args)
    "+": (add, 0, None),
    "-": (sub, 1, None),
    "*": (mul, 0, None),
    "/": (div, 1, None),
    "remainder": (remainder, 2, 2),
    "modulo": (modulo, 2, 2),
    "max": (maximum, 1, None),
    "min": (minimum, 1, None),
    "expt": (expt, 2, 2),
    "pow": (expt, 2, 2),
    "=": (equals, 2, 2),
    "equal?": (equals, 2, 2),
    "eq?": (eq, 2, 2),
    "not": (logical_not, 1, 1),
    "or": (logical_or, 0, None),
    "and": (logical_and, 0, None),
    "list": (list_builtin, 0, None),
    "list?": (is_list, 1, 1),
    "null?": (is_null, 1, 1),
    "pair?": (is_pair, 1, 1),
    "length": (length, 1, 1),
    "car": (car, 1, 1),
    "cdr": (cdr, 1, 1),
    "cons": (cons, 2, 2),
    "append": (append, 0, None),
    "reverse": (reverse, 1, 1),
    "map": (map_builtin, 2, None),
    "filter": (filter_builtin, 2, 2),
    "fold": (fold, 3, 3),
    "reduce": (fold, 3, 3),
    "apply": (apply, 2, 2),
}

COMPARISONS: dict[str, Callable[[float, float], bool]] = {
    ">": lambda a, b: a > b,
    "<": lambda a, b: a < b,
    ">=": lambda a, b: a >= b,
    "<=": lambda a, b: a <= b,
}


def register(env: Environment, channel: DisplayChannel | None = None) -> None:
    """Register all builtin procedures and constants into the given environment."""
    math_builtin.register(env)
    env.update(
        {Symbol(name): Builtin(name, fn, lo, hi) for name, (fn, lo, hi) in BUILTINS.items()}
    )
    env.update({Symbol(name): _comparison(name, op) for name, op in COMPARISONS.items()})
    env.define(Symbol("display"), display_builtin(channel or DisplayChannel()))
    env.define(Symbol("null"), Nil)


def make_global_environment(channel: DisplayChannel | None = None) -> Environment:
    env = Environment()
    register(env, channel)
    return env
