from sdscheme import SExpression, LispValue, EvaluatorFn
from sdscheme.types.environment import Environment
from sdscheme.types.nil import Nil


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    # Arity is not enforced: extra operands are ignored, none yields Nil
    return tail[0] if tail else Nil
