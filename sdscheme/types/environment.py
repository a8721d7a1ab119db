"""Runtime environment for sdscheme.

An Environment is a flat mapping from Symbols to evaluated values. There is no
`outer` link: a child scope is built by copying every binding of its parent and
overlaying the new ones. `define` and `set!` therefore only ever touch the
Environment instance they run in, never an enclosing scope.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from sdscheme import LispValue
from sdscheme.errors import SchemeTypeError, SchemeUnboundVariable
from sdscheme.types.symbol import Symbol


class Environment:
    """Flat, copy-on-extend mapping from Symbols to Scheme values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Mapping[Symbol, LispValue] | None = None):
        self.vars: dict[Symbol, LispValue] = dict(bindings) if bindings else {}

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any existing binding.

        Raises SchemeTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SchemeTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def set(self, name: Symbol, value: LispValue) -> None:
        """Rebind an existing `name` in this frame.

        Raises SchemeUnboundVariable if `name` is not bound here.
        """
        if name not in self.vars:
            raise SchemeUnboundVariable(f"Cannot set! unbound variable {name}")
        self.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        try:
            return self.vars[name]
        except KeyError:
            raise SchemeUnboundVariable(f"Unbound variable: {name}") from None

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in this frame."""
        for name, value in mapping.items():
            self.define(name, value)

    def extend(self, bindings: Iterable[tuple[Symbol, LispValue]] = ()) -> Environment:
        """Return a new Environment: a copy of this one overlaid with `bindings`."""
        child = Environment(self.vars)
        for name, value in bindings:
            child.define(name, value)
        return child

    def snapshot(self) -> Mapping[str, LispValue]:
        """Read-only copy of the current bindings keyed by symbol name."""
        return MappingProxyType({str(k): v for k, v in self.vars.items()})

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment {")
            buffer.write(", ".join(str(k) for k in self.vars))
            buffer.write("}>")
            return buffer.getvalue()
