import pytest

from sdscheme.reader.forms import extract_expressions, strip_comments
from sdscheme.reader.lexer import tokenize


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", []),
        (";; only a comment\n\n", []),
        ("(define x 1)\n(display x)", ["(define x 1)", "(display x)"]),
        (";; header\n(+ 1 2) ;; trailing\n\n x", ["(+ 1 2)", "x"]),
        ("(define (f x)\n  (* x 2))", ["(define (f x) (* x 2))"]),
        ("1 2 (+ 1 2)", ["1", "2", "(+ 1 2)"]),
        ("x(+ 1 2)", ["x", "(+ 1 2)"]),
        ('(display "a ) b")', ['(display "a ) b")']),
        ("(display 'it ) is')", ["(display 'it ) is')"]),
        ("(+ 1 2) (+ 1", ["(+ 1 2)"]),
        ("x)", ["x)"]),
    ],
)
def test_extract_expressions(text, expected):
    assert extract_expressions(text) == expected


def test_strip_comments():
    text = "  ;; a\n(a) ;; b\n\n  (b)  \n"
    assert strip_comments(text) == "(a) (b)"


@pytest.mark.parametrize(
    "text,expected",
    [
        ('(define s "a\\\\")\n(+ 1 2)', ['(define s "a\\\\")', "(+ 1 2)"]),
        (r'(display "say \"hi\"") x', [r'(display "say \"hi\"")', "x"]),
        (r"(display 'it\'s') (+ 1 2)", [r"(display 'it\'s')", "(+ 1 2)"]),
    ],
)
def test_escapes_inside_strings(text, expected):
    assert extract_expressions(text) == expected


def test_forms_agree_with_the_lexer():
    text = '(define s "a\\\\")\n(display s)'
    forms = extract_expressions(text)
    assert len(forms) == 2
    assert tokenize(forms[0]) == ["(", "define", "s", '"a\\\\"', ")"]
