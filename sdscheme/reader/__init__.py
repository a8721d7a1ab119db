from sdscheme.reader.lexer import tokenize
from sdscheme.reader.parser import parse, parse_all, atom, read
from sdscheme.reader.forms import extract_expressions

__all__ = ["tokenize", "parse", "parse_all", "atom", "read", "extract_expressions"]
