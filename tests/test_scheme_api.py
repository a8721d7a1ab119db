import pytest

from sdscheme.errors import SchemeError, SchemeSyntaxError
from sdscheme.interpreter import Interpreter
from sdscheme.types.environment import Environment
from sdscheme.types.nil import Nil
from sdscheme.types.symbol import Symbol


def test_evaluate(shared):
    assert shared.evaluate("(+ 1 2 3)") == 6
    assert shared.evaluate("(- 5)") == -5
    assert shared.evaluate("(/ 2)") == 0.5


def test_definitions_persist_between_calls(shared):
    shared.evaluate("(define x 10)")
    shared.evaluate("(set! x (+ x 5))")
    assert shared.evaluate("x") == 15


def test_reset_discards_definitions(shared):
    shared.evaluate("(define x 10)")
    shared.reset()
    assert "x" not in shared.get_environment()


def test_empty_source_is_nil(shared):
    assert shared.evaluate("") is Nil


@pytest.mark.parametrize("source", ["(+ 1", ")", "(car)", "(nope)", "(1 2)", "(car 5)"])
def test_failures_are_scheme_errors(shared, source):
    with pytest.raises(SchemeError):
        shared.evaluate(source)


def test_syntax_error_message(shared):
    with pytest.raises(SchemeSyntaxError, match="unexpected EOF"):
        shared.evaluate("(define x")


def test_display_sink_is_swappable(shared):
    first, second = [], []
    shared.set_display_output(first.append)
    assert shared.evaluate('(display "hi")') is Nil
    shared.set_display_output(second.append)
    shared.evaluate("(display (list 1 2))")
    assert first == ["hi"]
    assert second == [[1, 2]]


def test_default_display_writes_to_stdout(shared, capsys):
    shared.set_display_output(None)
    shared.evaluate('(display "hi")')
    shared.evaluate('(display (list 1 "a" #t))')
    assert capsys.readouterr().out == "hi\n(1 a #t)\n"


def test_get_environment(shared):
    names = shared.get_environment()
    assert "car" in names and "pi" in names
    shared.evaluate("(define answer 42)")
    assert shared.get_environment()["answer"] == 42
    assert "answer" not in names


def test_make_global_environment(shared):
    env = shared.make_global_environment()
    assert isinstance(env, Environment)
    assert Symbol("car") in env
    assert Symbol("answer") not in env


def test_interpreters_are_independent():
    out_a, out_b = [], []
    a, b = Interpreter(display=out_a.append), Interpreter(display=out_b.append)
    a.eval("(define x 1) (display x)")
    assert "x" not in b.environment()
    b.eval("(display 2)")
    assert out_a == [1] and out_b == [2]


def test_prelude():
    interp = Interpreter(prelude="(define (double x) (* 2 x))")
    assert interp.eval("(double 4)") == 8
