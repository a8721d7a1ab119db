from sdscheme import SExpression, LispValue, EvaluatorFn
from sdscheme.errors import SchemeArityError, SchemeTypeError
from sdscheme.types.environment import Environment
from sdscheme.types.procedure import Closure
from sdscheme.types.symbol import Symbol

BEGIN = Symbol("begin")


def make_body(body_forms: list[SExpression]) -> SExpression:
    """Several body forms run as an implicit begin."""
    if len(body_forms) == 1:
        return body_forms[0]
    return [BEGIN, *body_forms]


def check_params(params: SExpression) -> list[Symbol]:
    if not isinstance(params, list):
        raise SchemeTypeError(f"Parameter list must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise SchemeTypeError(f"Parameter names must be symbols, got {p}")
    return list(params)


def lambda_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    # (lambda (params...) body...)
    if len(tail) < 2:
        raise SchemeArityError("lambda requires a parameter list and a body")

    params = check_params(tail[0])
    return Closure(params, make_body(tail[1:]), env)
