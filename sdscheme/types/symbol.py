from __future__ import annotations

import weakref


class Symbol:
    """An identifier token. Live instances are interned: one object per name.

    The table holds weak references, so names no longer referenced by any
    parsed expression or environment are released.
    """

    __slots__ = ("id", "__weakref__")
    _table: "weakref.WeakValueDictionary[str, Symbol]" = weakref.WeakValueDictionary()

    def __new__(cls, name: str) -> "Symbol":
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = name
            cls._table[name] = sym
        return sym

    def __eq__(self, other: object) -> bool:
        return self is other or (isinstance(other, Symbol) and self.id == other.id)

    def __hash__(self) -> int:
        return hash(self.id)

    def __reduce__(self):
        return (Symbol, (self.id,))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
