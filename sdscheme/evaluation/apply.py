"""Application engine for sdscheme.

Centralizes how a procedure value is invoked so the evaluator and the
higher-order builtins (`map`, `filter`, `fold`, `apply`) share one path:
- Closures bind their parameters over a copy of the captured environment
  and evaluate the body there.
- Builtins are called with the caller's environment and the argument list.
"""

from sdscheme import LispValue, EvaluatorFn
from sdscheme.errors import SchemeTypeError
from sdscheme.printer import to_string
from sdscheme.types.environment import Environment
from sdscheme.types.procedure import Builtin, Closure


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate `fn`'s body in a fresh scope binding its params to `args`.

    Raises SchemeArityError unless len(args) == len(fn.params).
    """
    new_env = fn.bind(list(args))
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Builtin; anything else is a type error."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Builtin):
        return head(env, list(args))
    else:
        raise SchemeTypeError(f"{to_string(head)} is not a procedure")
