from __future__ import annotations


class NilType:
    """The Nil value: returned by `car` of an empty list, a missing `if` branch, etc.

    Distinct from the empty list `[]`; both satisfy `null?`.
    """
    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "null"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()


def is_truthy(value) -> bool:
    """Only #f and Nil are false; 0, "" and the empty list are true."""
    return not (value is False or isinstance(value, NilType))
