# Core type aliases for the sdscheme data model.
# Plain Python types stand in for Scheme values:
#   numbers -> float, booleans -> bool, strings -> str, lists -> list,
#   symbols -> Symbol, the empty/no value -> Nil, procedures -> Builtin | Closure.
#
# Naming guidance:
# - SExpression: use in reader/parser code for syntactic forms.
# - LispValue:  use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (interchangeable with LispValue)
SExpression = LispValue

# Evaluator function type passed into special forms and the apply engine
EvaluatorFn = Callable[..., LispValue]
