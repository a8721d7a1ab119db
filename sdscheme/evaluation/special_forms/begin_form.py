from sdscheme import SExpression, LispValue, EvaluatorFn
from sdscheme.errors import SchemeArityError
from sdscheme.types.environment import Environment


def begin_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if not tail:
        raise SchemeArityError("begin requires at least one expression")
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(tail[-1], env)
