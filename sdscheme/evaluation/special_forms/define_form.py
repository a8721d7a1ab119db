from sdscheme import SExpression, LispValue, EvaluatorFn
from sdscheme.errors import SchemeArityError, SchemeTypeError
from sdscheme.evaluation.special_forms.lambda_form import check_params, make_body
from sdscheme.types.environment import Environment
from sdscheme.types.nil import Nil
from sdscheme.types.procedure import Closure
from sdscheme.types.symbol import Symbol


def define_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (define name expr)
    (define (name params...) body...)

    Binds in `env` only; inside a closure call or let body that is the local
    scope copy, never the enclosing one.
    """
    if len(tail) < 2:
        raise SchemeArityError("define requires a name and a value")

    target = tail[0]
    if isinstance(target, list):
        if not target or not isinstance(target[0], Symbol):
            raise SchemeTypeError(f"Malformed define target: {target}")
        name, *params = target
        closure = Closure(check_params(params), make_body(tail[1:]), env, name=str(name))
        env.define(name, closure)
        return Nil

    if len(tail) != 2:
        raise SchemeArityError("define requires exactly a name and one value expression")
    if not isinstance(target, Symbol):
        raise SchemeTypeError(f"define name must be a symbol, got {target}")
    value = evaluate_fn(tail[1], env)
    if isinstance(value, Closure) and value.name is None:
        value.name = str(target)
    env.define(target, value)
    return Nil
