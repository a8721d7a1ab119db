import pytest
from lsprotocol.types import CompletionItemKind, Position

from sdscheme.interpreter import Interpreter
from sdscheme_lsp import features
from sdscheme_lsp.indexer import build_index

DOC = """\
;; (define hidden 0)
(define x 1)
(define (f a)
  (* a 2))
"""


def test_index_defines():
    idx = build_index(DOC)
    assert set(idx.symbols) == {"x", "f"}
    assert (idx.symbols["x"].kind, idx.symbols["x"].line, idx.symbols["x"].col) == ("var", 1, 8)
    assert (idx.symbols["f"].kind, idx.symbols["f"].line, idx.symbols["f"].col) == ("function", 2, 9)
    assert idx.paren_balance == 0
    assert not idx.has_unmatched_quote


@pytest.mark.parametrize(
    "text,balance,quote",
    [
        ("(define x 1", 1, False),
        ("(a))", -1, False),
        ('(display "abc)', 0, True),
        ('(display "a;b")', 0, False),
    ],
)
def test_index_balance(text, balance, quote):
    idx = build_index(text)
    assert idx.paren_balance == balance
    assert idx.has_unmatched_quote is quote


def test_syntax_errors():
    assert features.syntax_errors("(+ 1 2)") == []
    errors = features.syntax_errors("(+ 1 2)\nx)")
    assert len(errors) == 1 and "unexpected close paren" in errors[0]


def test_diagnostics():
    text = "(+ 1"
    diags = features.build_diagnostics(text, build_index(text))
    assert [d.message for d in diags] == ["Unmatched parentheses detected"]


def test_completion_items():
    items = {i.label: i for i in features.completion_items(Interpreter(), build_index(DOC))}
    assert items["define"].kind == CompletionItemKind.Keyword
    assert items["car"].kind == CompletionItemKind.Function
    assert items["car"].detail == "(car xs)"
    assert items["pi"].kind == CompletionItemKind.Constant
    assert items["f"].kind == CompletionItemKind.Function
    assert items["x"].kind == CompletionItemKind.Variable


def test_hover_text():
    interp, idx = Interpreter(), build_index(DOC)
    assert features.hover_text("car", interp, idx) == "(car xs)"
    assert features.hover_text("x", interp, idx) == "x — var (defined at 2:9)"
    assert features.hover_text("sqrt", interp, idx) == "sqrt — builtin procedure"
    assert features.hover_text("nothing", interp, idx) is None


def test_extract_word_at():
    assert features.extract_word_at("(define foo 1)", Position(line=0, character=9)) == "foo"
    assert features.extract_word_at("(a)", Position(line=5, character=0)) is None


def test_run_document():
    interp = Interpreter()
    lines = features.run_document(interp, '(display "hi")\n(car 5)\n(+ 1 2)')
    assert lines[0] == '[display] "hi"'
    assert lines[1].startswith("Scheme error: car")
    assert lines[2] == "Scheme => 3"


def test_run_document_keeps_session_state():
    interp = Interpreter()
    features.run_document(interp, "(define y 4)")
    assert features.run_document(interp, "(* y y)") == ["Scheme => 16"]
