import pytest
from hypothesis import given, strategies as st

from lemon.errors import LemonParseError, LemonSyntaxError, LemonTokenizeError
from lemon.reader.parser import lex, parse, TokenStream
from lemon.types.keyword import Keyword
from lemon.types.quoted import Quoted
from lemon.types.symbol import Symbol


# Convert nested list to Lisp source string
def _to_lisp_source(expr):
    if isinstance(expr, list):
        return f"({' '.join(_to_lisp_source(e) for e in expr)})"
    return str(expr)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ("[a]", [("lparen", "["), ("symbol", "a"), ("rparen", "]")]),
        ('"hello"', [("string", '"hello"')]),
        ('"say \\"hi\\""', [("string", '"say \\"hi\\""')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(+ 1 2) ; trailing", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "2"), ("rparen", ")")]),
        ("#b1010 #xA", [("symbol", "#b1010"), ("symbol", "#xA")]),
        ("   ", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize("source", ["{", "a,b", "`x", "a|b", "(a \\ b)", "a'b", 'a"b"'])
def test_lexer_rejects_unexpected_characters(source):
    with pytest.raises(LemonTokenizeError, match="Unexpected character"):
        list(lex(source))


def test_lexer_rejects_unclosed_string():
    with pytest.raises(LemonTokenizeError, match="Unclosed string"):
        list(lex('(display "oops)'))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("3.14", 3.14),
        ("-0.5", -0.5),
        ("1e3", 1000.0),
        ("#t", True),
        ("#f", False),
        ("#b1010", 10),
        ("#o12", 10),
        ("#d12", 12),
        ("#xff", 255),
        ("abc", Symbol("abc")),
        ("+", Symbol("+")),
        ("define", Keyword.DEFINE),
        ("lambda", Keyword.LAMBDA),
        ("if", Keyword.IF),
        ("'a", Quoted(Symbol("a"))),
        ("'(1 2)", Quoted([1, 2])),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
        ('"hello"', "hello"),
        ('"a\\nb"', "a\nb"),
        ('"q\\"q"', 'q"q'),
        ('"back\\\\slash"', "back\\slash"),
    ]
)
def test_parser(source, expected):
    stream = TokenStream(lex(source))
    result = list(stream.parse_all())
    assert result[0] == expected     # Parser yields one expression


def test_nested_lists():
    source = "((a b) [c d])"
    assert parse(source) == [[[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]]


def test_multiple_expressions():
    assert parse("(define x 1) x") == [[Keyword.DEFINE, Symbol("x"), 1], Symbol("x")]


def test_empty_source():
    assert parse("") == []
    assert TokenStream(lex("")).parse_expr() is None


@pytest.mark.parametrize(
    "source, message",
    [
        ("(a b", "Missing token"),
        (")", "Invalid syntax"),
        ("'", "Unexpected EOF"),
        ("#b102", "Invalid digit"),
        ("#xZZ", "Invalid digit"),
        ("#q1", "Invalid syntax"),
        ("(#not #f)", "Invalid syntax"),
        ("#", "Invalid syntax"),
    ]
)
def test_parse_errors(source, message):
    with pytest.raises(LemonParseError, match=message):
        parse(source)


def test_syntax_errors_share_a_base_class():
    assert issubclass(LemonTokenizeError, LemonSyntaxError)
    assert issubclass(LemonParseError, LemonSyntaxError)


symbols = st.from_regex(r"[a-z][a-z0-9\-?!*]{0,6}", fullmatch=True).filter(
    lambda s: s not in ("define", "lambda", "if")
)
atoms = st.one_of(st.integers(), symbols.map(Symbol))
trees = st.recursive(atoms, lambda children: st.lists(children, max_size=4), max_leaves=12)


@given(trees)
def test_printed_trees_read_back(tree):
    assert parse(_to_lisp_source(tree)) == [tree]
