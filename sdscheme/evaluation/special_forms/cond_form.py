from sdscheme import SExpression, LispValue, EvaluatorFn
from sdscheme.errors import SchemeArityError, SchemeTypeError
from sdscheme.types.environment import Environment
from sdscheme.types.nil import Nil, is_truthy
from sdscheme.types.symbol import Symbol

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (cond (test body...) ... (else body...))

    Clauses are tried in order; the first clause whose test is truthy (or is
    `else`) has its body evaluated and the last value returned. Nil if no
    clause matches.
    """
    if not tail:
        raise SchemeArityError("cond requires at least one clause")

    for clause in tail:
        if not isinstance(clause, list) or len(clause) < 2:
            raise SchemeTypeError(f"Malformed cond clause: {clause}")
        test, *body = clause
        if test == ELSE or is_truthy(evaluate_fn(test, env)):
            result: LispValue = Nil
            for expr in body:
                result = evaluate_fn(expr, env)
            return result
    return Nil
