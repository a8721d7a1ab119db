"""Output side channel used by the `display` builtin.

A DisplayChannel holds exactly one active sink. The host may swap it at any
time; with no sink installed, values are written to stdout.
"""

from __future__ import annotations

from typing import Callable, Optional

from sdscheme import LispValue
from sdscheme.printer import to_string

DisplaySink = Callable[[LispValue], None]


def console_sink(value: LispValue) -> None:
    print(to_string(value, readable=False))


class DisplayChannel:
    __slots__ = ("_sink",)

    def __init__(self, sink: Optional[DisplaySink] = None):
        self._sink: Optional[DisplaySink] = sink

    @property
    def sink(self) -> DisplaySink:
        return self._sink or console_sink

    def set_sink(self, sink: Optional[DisplaySink]) -> None:
        """Replace the active sink; None restores the console default."""
        self._sink = sink

    def write(self, value: LispValue) -> None:
        self.sink(value)
