from sdscheme import SExpression, LispValue, EvaluatorFn
from sdscheme.errors import SchemeArityError
from sdscheme.types.environment import Environment
from sdscheme.types.nil import Nil, is_truthy


def if_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) not in (2, 3):
        raise SchemeArityError("if requires a test, a consequent and an optional alternative")

    if is_truthy(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
