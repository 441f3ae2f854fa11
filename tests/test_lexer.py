import pytest
from hypothesis import given, strategies as st

from flisp.errors import LexError
from flisp.reader.lexer import tokenize
from flisp.types.token import TokenKind


def _kinds(source):
    return [(t.kind, t.text) for t in tokenize(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(", [(TokenKind.LPAREN, "(")]),
        ("'x", [(TokenKind.QUOTE, "'"), (TokenKind.ATOM, "x")]),
        ("42", [(TokenKind.INTEGER, "42")]),
        ("-7", [(TokenKind.INTEGER, "-7")]),
        ("+7", [(TokenKind.INTEGER, "7")]),
        ("3.25", [(TokenKind.REAL, "3.25")]),
        ("-0.5", [(TokenKind.REAL, "-0.5")]),
        ("true false", [(TokenKind.BOOLEAN, "true"), (TokenKind.BOOLEAN, "false")]),
        ("null", [(TokenKind.NULL, "null")]),
        ("quote", [(TokenKind.QUOTE, "quote")]),
        ("my_var2", [(TokenKind.ATOM, "my_var2")]),
        ("-", [(TokenKind.ATOM, "-")]),
        (
            "(plus 1 2)",
            [
                (TokenKind.LPAREN, "("),
                (TokenKind.PLUS, "plus"),
                (TokenKind.INTEGER, "1"),
                (TokenKind.INTEGER, "2"),
                (TokenKind.RPAREN, ")"),
            ],
        ),
    ],
)
def test_tokens(source, expected):
    assert _kinds(source) == expected


@pytest.mark.parametrize(
    "word,kind",
    [
        ("setq", TokenKind.SETQ),
        ("func", TokenKind.FUNC),
        ("lambda", TokenKind.LAMBDA),
        ("while", TokenKind.WHILE),
        ("greatereq", TokenKind.GREATEREQ),
        ("isnull", TokenKind.ISNULL),
        ("xnor", TokenKind.XNOR),
        ("eval", TokenKind.EVAL),
    ],
)
def test_keywords(word, kind):
    assert TokenKind.from_string(word) is kind


def test_line_numbers_are_one_based():
    tokens = tokenize("(setq x 1)\n\nx")
    assert tokens[0].line == 1
    assert tokens[-1].line == 3


def test_newlines_only_kept_on_request():
    assert all(t.kind is not TokenKind.NEWLINE for t in tokenize("a\nb"))
    kinds = [t.kind for t in tokenize("a\nb", keep_newlines=True)]
    assert kinds == [TokenKind.ATOM, TokenKind.NEWLINE, TokenKind.ATOM]


@pytest.mark.parametrize("source", ["3abc", "12_x", "1.5e", "-abc", "+x"])
def test_number_followed_by_letter(source):
    with pytest.raises(LexError):
        tokenize(source)


def test_malformed_real():
    with pytest.raises(LexError):
        tokenize("3.")


@pytest.mark.parametrize("source,line", [("#", 1), ("(plus 1 2)\n  @", 2)])
def test_unexpected_character(source, line):
    with pytest.raises(LexError) as info:
        tokenize(source)
    assert info.value.line == line


@given(st.integers())
def test_integer_roundtrip(n):
    [token] = tokenize(str(n))
    assert token.kind is TokenKind.INTEGER
    assert int(token.text) == n
