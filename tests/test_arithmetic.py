import math

import pytest

from sdscheme.errors import SchemeApplicationError, SchemeArityError, SchemeRuntimeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 5)", -5),
        ("(/ 2)", 0.5),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3 2)", 2),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(remainder 7 3)", 1),
        ("(remainder -7 3)", -1),
        ("(modulo -7 3)", 2),
        ("(modulo 7 -3)", -2),
        ("(max 1 5 3)", 5),
        ("(min 4 2 8)", 2),
        ("(expt 2 10)", 1024),
        ("(sqrt 16)", 4),
        ("(floor 2.7)", 2),
        ("(ceil 2.1)", 3),
        ("(abs -3)", 3),
        ("(round 2.5)", 3),
        ("(cos 0)", 1),
    ],
)
def test_arithmetic(interp, source, expected):
    assert interp.eval(source) == pytest.approx(expected)


def test_numbers_are_floats(interp):
    assert isinstance(interp.eval("(+ 1 2)"), float)
    assert isinstance(interp.eval("(floor 2.5)"), float)


def test_constants(interp):
    assert interp.eval("pi") == math.pi
    assert interp.eval("e") == math.e


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(> 3 2)", True),
        ("(< 3 2)", False),
        ("(>= 2 2)", True),
        ("(<= 3 2)", False),
        ("(= 1 1)", True),
        ('(= "a" "a")', True),
        ('(= 1 "1")', False),
        ("(equal? (list 1 2) (list 1 2))", True),
        ("(equal? (list 1 (list 2)) (list 1 (list 3)))", False),
        ("(eq? (list 1 2) (list 1 2))", False),
        ("(eq? 2 2)", True),
        ("(eq? #t 1)", False),
        ("(not #f)", True),
        ("(not 0)", False),
        ("(not null)", True),
    ],
)
def test_comparison_and_equality(interp, source, expected):
    assert interp.eval(source) is expected


def test_eq_on_the_same_list(interp):
    interp.eval("(define xs (list 1 2))")
    assert interp.eval("(eq? xs xs)") is True


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(or #f 2 3)", 2.0),
        ("(or #f #f)", False),
        ("(or)", False),
        ("(and 1 2 3)", 3.0),
        ("(and 1 #f 3)", False),
        ("(and)", True),
    ],
)
def test_or_and(interp, source, expected):
    result = interp.eval(source)
    assert result == expected and type(result) is type(expected)


def test_or_and_evaluate_every_operand(interp):
    # procedures, not special forms: all operands run before the call
    interp.eval("(define hits 0)")
    interp.eval("(or #t (set! hits 1))")
    assert interp.eval("hits") == 1
    with pytest.raises(SchemeApplicationError):
        interp.eval("(or #t (car 5))")


@pytest.mark.parametrize("source", ["(+ 1 \"a\")", "(/ 1 0)", "(modulo 1 0)", "(sqrt -1)", "(> 1 (list))"])
def test_runtime_failures_are_tagged(interp, source):
    with pytest.raises(SchemeApplicationError) as info:
        interp.eval(source)
    assert isinstance(info.value, SchemeRuntimeError)
    assert info.value.procedure == source[1:].split()[0]


@pytest.mark.parametrize("source", ["(-)", "(/)", "(remainder 1)", "(> 1 2 3)", "(sqrt)"])
def test_builtin_arity(interp, source):
    with pytest.raises(SchemeArityError):
        interp.eval(source)


@pytest.mark.parametrize(
    "source,message",
    [
        ("(/ 1 0)", "/: division by zero"),
        ("(modulo 1 0)", "modulo: division by zero"),
        ("(length 5)", "length: expected a list or string, got 5"),
        ("(+ 1 (list))", "+: expected a number, got ()"),
        ("(map car (list 1))", "map: expected a list, got 1"),
    ],
)
def test_runtime_error_names_the_procedure_once(interp, source, message):
    with pytest.raises(SchemeApplicationError) as info:
        interp.eval(source)
    assert str(info.value) == message


def test_host_math_errors_are_tagged_once(interp):
    with pytest.raises(SchemeApplicationError) as info:
        interp.eval("(sqrt -1)")
    assert str(info.value).startswith("sqrt: ")
    assert not str(info.value).startswith("sqrt: sqrt")
