import pytest
from hypothesis import given, strategies as st

from conslisp.errors import ParseError
from conslisp.reader.lexer import lex
from conslisp.reader.parser import Parser, parse, parse_all, parse_token
from conslisp.types.atom import Atom, AtomType
from conslisp.types.nil import NIL_REF


@pytest.fixture
def parser():
    return Parser()


# -----------------------------------------------------
# Token classification
# -----------------------------------------------------

@pytest.mark.parametrize(
    "token, expected",
    [
        ("42", Atom.create(42)),
        ("-7", Atom.create(-7)),
        ("+3", Atom.create(3)),
        ("+", Atom.symbol("+")),
        ("*", Atom.symbol("*")),
        ("-", Atom.create("-")),
        ("FOO", Atom.create("FOO")),
        ("'", Atom.create("'")),
    ],
)
def test_parse_token(token, expected):
    assert parse_token(token) == expected


@pytest.mark.parametrize("token", ["NIL", "nil", "Nil"])
def test_nil_token_is_sentinel(token):
    assert parse_token(token) is NIL_REF


def test_identifiers_are_literals():
    assert parse_token("FOO").type is AtomType.STRING


# -----------------------------------------------------
# Parsing
# -----------------------------------------------------

def test_empty_input_gives_none(parser):
    assert parser.parse([]) is None
    assert parser.parse_all([]) == []


def test_single_token_is_storage(parser):
    tree = parser.parse(["123"])
    assert tree.root.is_storage()
    assert tree.root.to_atom() == Atom.create(123)


def test_single_nil_token(parser):
    tree = parser.parse(["NIL"])
    assert tree.root.is_nil()
    assert tree.unparse() == "NIL"


@pytest.mark.parametrize(
    "source, unparsed",
    [
        ("(A B C)", "( A B C )"),
        ("( A ( B C ) )", "( A ( B C ) )"),
        ("(A (B C (C D ) ) )", "( A ( B C ( C D ) ) )"),
        ("((A))", "( ( A ) )"),
        ("(FOO NIL)", "( FOO NIL )"),
        ("'(FOO BAR 'BAZ)", "( QUOTE ( FOO BAR ' BAZ ) )"),
    ],
)
def test_parse_lists(source, unparsed):
    assert parse(source).unparse() == unparsed


def test_raw_quote_tokens_are_expanded(parser):
    assert parser.parse(["'", "FOO"]).unparse() == "( QUOTE FOO )"
    assert parser.parse(["(", "CAR", "'", "(", "A", ")", ")"]).unparse() == "( CAR ( QUOTE ( A ) ) )"


def test_lexer_output_is_not_expanded_twice(parser):
    tokens = lex("'(A 'B)")
    assert parser.parse(tokens).unparse() == "( QUOTE ( A ' B ) )"


def test_parse_all_splits_forms():
    trees = parse_all("1 (+ 1 2) FOO '(A)")
    assert [tree.unparse() for tree in trees] == ["1", "( + 1 2 )", "FOO", "( QUOTE ( A ) )"]


def test_parse_rejects_trailing_tokens():
    with pytest.raises(ParseError):
        parse("(A B) C")


@pytest.mark.parametrize(
    "tokens",
    [
        ["(", "A"],
        ["(", "A", ")", ")"],
        [")", "("],
        ["(", "(", "A", ")"],
    ],
)
def test_mismatched_parentheses(parser, tokens):
    with pytest.raises(ParseError, match="Mismatched parentheses"):
        parser.parse(tokens)


# -----------------------------------------------------
# Dotted pairs
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source, unparsed",
    [
        ("(A . (B C))", "( A B C )"),
        ("(A . NIL)", "( A )"),
        ("(A . ())", "( A )"),
        ("(A B . (C))", "( A B C )"),
        ("((A) . ((B)))", "( ( A ) ( B ) )"),
    ],
)
def test_dotted_pairs(source, unparsed):
    assert parse(source).unparse() == unparsed


def test_dotted_pair_text():
    assert str(parse("(A . (B C))")) == "(A . (B . (C . NIL)))"


@pytest.mark.parametrize("source", ["(A . B)", "(. A)", "(A . (B) C)", "(A .)", "(A . . (B))", "."])
def test_malformed_dotted_pairs(source):
    with pytest.raises(ParseError):
        parse(source)


# -------------------------------
# Hypothesis tests
# -------------------------------
names = st.from_regex(r"[A-Za-z][A-Za-z0-9]{0,6}", fullmatch=True).filter(lambda s: s.upper() != "NIL")
numbers = st.integers(min_value=-1000, max_value=1000).map(str)
forms = st.recursive(
    st.one_of(names, numbers),
    lambda children: st.lists(children, min_size=1, max_size=4),
    max_leaves=12,
)


def _render(form):
    if isinstance(form, list):
        return "( " + " ".join(_render(f) for f in form) + " )"
    return form


@given(st.lists(forms, min_size=1, max_size=4))
def test_unparse_round_trip(elements):
    source = _render(elements)
    assert parse(source).unparse() == source
