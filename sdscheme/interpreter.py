from __future__ import annotations

from typing import Mapping, Optional

from sdscheme import LispValue
from sdscheme.builtin.env_builtin import make_global_environment
from sdscheme.display import DisplayChannel, DisplaySink
from sdscheme.evaluation.evaluator import evaluate
from sdscheme.reader.lexer import tokenize
from sdscheme.reader.parser import parse_all
from sdscheme.types.environment import Environment
from sdscheme.types.nil import Nil


class Interpreter:
    """
    Reads and evaluates sdscheme code against one persistent global
    Environment. The display sink is owned by the interpreter and can be
    swapped at any time.
    """

    def __init__(self, display: Optional[DisplaySink] = None, prelude: str | None = None):
        self.display = DisplayChannel(display)
        self.env: Environment = make_global_environment(self.display)

        if prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`; return the last value (Nil if none)."""
        result: LispValue = Nil
        for expr in parse_all(tokenize(code)):
            result = evaluate(expr, self.env)
        return result

    def set_display_output(self, sink: Optional[DisplaySink]) -> None:
        self.display.set_sink(sink)

    def environment(self) -> Mapping[str, LispValue]:
        """Read-only snapshot of the global bindings."""
        return self.env.snapshot()
