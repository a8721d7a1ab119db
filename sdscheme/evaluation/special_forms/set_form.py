from sdscheme import SExpression, LispValue, EvaluatorFn
from sdscheme.errors import SchemeArityError, SchemeTypeError, SchemeUnboundVariable
from sdscheme.types.environment import Environment
from sdscheme.types.nil import Nil
from sdscheme.types.symbol import Symbol


def set_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 2:
        raise SchemeArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SchemeTypeError(f"set! first argument must be a symbol, got {var_sym}")
    if var_sym not in env:
        raise SchemeUnboundVariable(f"Cannot set! unbound variable {var_sym}")
    env.set(var_sym, evaluate_fn(val_expr, env))
    return Nil
