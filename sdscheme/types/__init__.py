from sdscheme.types.symbol import Symbol
from sdscheme.types.nil import Nil, NilType, is_truthy
from sdscheme.types.environment import Environment
from sdscheme.types.procedure import Builtin, Closure, is_procedure

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "is_truthy",
    "Environment",
    "Builtin",
    "Closure",
    "is_procedure",
]
