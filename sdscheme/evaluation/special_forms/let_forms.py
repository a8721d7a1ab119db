"""`let` and `let*`.

Both build one flattened scope copy (see Environment.extend). `let` evaluates
every binding value in the outer environment, so bindings cannot see each
other; `let*` extends the scope one binding at a time.
"""

from sdscheme import SExpression, LispValue, EvaluatorFn
from sdscheme.errors import SchemeArityError, SchemeTypeError
from sdscheme.types.environment import Environment
from sdscheme.types.symbol import Symbol


def _split_bindings(form: str, bindings: SExpression) -> list[tuple[Symbol, SExpression]]:
    if not isinstance(bindings, list):
        raise SchemeTypeError(f"{form} bindings must be a list, got {bindings}")
    pairs = []
    for binding in bindings:
        if (
            not isinstance(binding, list)
            or len(binding) != 2
            or not isinstance(binding[0], Symbol)
        ):
            raise SchemeTypeError(f"Malformed {form} binding: {binding}")
        pairs.append((binding[0], binding[1]))
    return pairs


def _eval_body(body: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    result: LispValue = None
    for expr in body:
        result = evaluate_fn(expr, env)
    return result


def let_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) < 2:
        raise SchemeArityError("let requires bindings and a body")
    pairs = _split_bindings("let", tail[0])
    values = [(name, evaluate_fn(expr, env)) for name, expr in pairs]
    return _eval_body(tail[1:], env.extend(values), evaluate_fn)


def let_star_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) < 2:
        raise SchemeArityError("let* requires bindings and a body")
    scope = env
    for name, expr in _split_bindings("let*", tail[0]):
        scope = scope.extend([(name, evaluate_fn(expr, scope))])
    if scope is env:
        scope = env.extend()
    return _eval_body(tail[1:], scope, evaluate_fn)
