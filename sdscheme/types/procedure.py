"""Procedure values: native Builtins and user-defined Closures."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from sdscheme import SExpression, LispValue
from sdscheme.errors import SchemeArityError, SchemeRuntimeError
from sdscheme.types.environment import Environment
from sdscheme.types.symbol import Symbol

BuiltinFn = Callable[[Environment, list[LispValue]], LispValue]

# Host errors a builtin may leak; reported as Scheme runtime errors
_HOST_ERRORS = (TypeError, ValueError, ZeroDivisionError, OverflowError)


class Builtin:
    """A native procedure with a declared arity, called as fn(env, args)."""

    __slots__ = ("name", "fn", "min_args", "max_args")

    def __init__(
        self,
        name: str,
        fn: BuiltinFn,
        min_args: int = 0,
        max_args: int | None = None,
    ):
        self.name = name
        self.fn = fn
        self.min_args = min_args
        # None means variadic
        self.max_args = max_args

    def check_arity(self, count: int) -> None:
        if count < self.min_args or (self.max_args is not None and count > self.max_args):
            raise SchemeArityError(
                f"{self.name} expects {self._arity_text()} argument(s), got {count}"
            )

    def _arity_text(self) -> str:
        if self.max_args is None:
            return f"at least {self.min_args}"
        if self.min_args == self.max_args:
            return str(self.min_args)
        return f"{self.min_args} to {self.max_args}"

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        self.check_arity(len(args))
        try:
            return self.fn(env, args)
        except _HOST_ERRORS as exc:
            raise SchemeRuntimeError(str(exc)) from exc

    def __repr__(self) -> str:
        return f"#<builtin {self.name}>"


class Closure:
    """A first-class lambda with formal parameters, body, and captured env."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: list[Symbol],
        body: SExpression,
        env: Environment,
        name: str | None = None,
    ):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # Captured by reference: later defines in `env` stay visible
        self.env: Environment = env
        self.name = name

    def bind(self, args: list[LispValue]) -> Environment:
        """Return the captured env overlaid with one binding per parameter."""
        if len(args) != len(self.params):
            raise SchemeArityError(
                f"{self.name or 'lambda'} expects {len(self.params)} argument(s), got {len(args)}"
            )
        return self.env.extend(zip(self.params, args))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<procedure")
            if self.name:
                buffer.write(" ")
                buffer.write(self.name)
            buffer.write(" (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, (Builtin, Closure))
