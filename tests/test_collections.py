import pytest

from conslisp.errors import EvaluationError, WrongArgumentCountError
from conslisp.types.atom import Atom
from conslisp.types.cons_list import List


# -----------------------------------------------------
# LENGTH / SIZE
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(LENGTH (QUOTE (A B C)))", 3),
        ("(LENGTH (QUOTE (Z ())))", 2),
        ("(LENGTH (QUOTE ((A B C) 1 (DEF) 3)))", 4),
        ("(LENGTH '())", 0),
        ("(LENGTH (LIST 1 2 (+ 1 2)))", 3),
    ],
)
def test_length(run, source, expected):
    assert run(source) == Atom.create(expected)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(SIZE '(A B C))", 3),
        ("(SIZE '((A B) C (D (E))))", 5),
        ("(SIZE '())", 0),
    ],
)
def test_size(run, source, expected):
    assert run(source) == Atom.create(expected)


@pytest.mark.parametrize("source", ["(LENGTH 'A)", "(SIZE 7)"])
def test_length_of_atom(run, source):
    with pytest.raises(EvaluationError, match="must be a list"):
        run(source)


def test_length_arity(run):
    with pytest.raises(WrongArgumentCountError):
        run("(LENGTH '(A) '(B))")


# -----------------------------------------------------
# LIST
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(LIST 1 2 3)", "( 1 2 3 )"),
        ("(LIST 'A (+ 1 2))", "( A 3 )"),
        ("(LIST (LIST 'A 'B) (LIST 'C 'D))", "( ( A B ) ( C D ) )"),
        ("(LIST '(A) 'B)", "( ( A ) B )"),
    ],
)
def test_list(run, source, expected):
    assert str(run(source)) == expected


def test_empty_list(run):
    result = run("(LIST)")
    assert isinstance(result, List)
    assert result.is_empty()


# -----------------------------------------------------
# APPEND
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(APPEND '(A) '(B))", "( A B )"),
        ("(APPEND '(A) '() '(B) '())", "( A B )"),
        ("(APPEND '((A) (B)) ' ((C) (D)))", "( ( A ) ( B ) ( C ) ( D ) )"),
        ("(APPEND '(A B) '(C) '(D E F))", "( A B C D E F )"),
    ],
)
def test_append(run, source, expected):
    assert str(run(source)) == expected


def test_append_single_atom(run):
    assert run("(APPEND 'A)") == Atom.create("A")


def test_append_nothing(run):
    assert run("(APPEND)").is_empty()


def test_append_atom_first(run):
    with pytest.raises(EvaluationError, match="APPEND"):
        run("(APPEND 'A 'B 'C)")


def test_append_leaves_arguments_intact(run):
    run("(SETQ front '(A B))")
    run("(SETQ back '(C))")
    assert str(run("(APPEND front back)")) == "( A B C )"
    assert str(run("front")) == "( A B )"
    assert str(run("back")) == "( C )"


# -----------------------------------------------------
# ASSOC
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(ASSOC 'oak '((pine cones) (oak acorns) (maple seeds)))", "( oak acorns )"),
        ("(ASSOC 'x '((a 1) (b 2) (x (3 4 5))))", "( x ( 3 4 5 ) )"),
        ("(ASSOC 2 '((1 one) (2 two)))", "( 2 two )"),
        ("(ASSOC '(k) '(((k) found)))", "( ( k ) found )"),
    ],
)
def test_assoc(run, source, expected):
    assert str(run(source)) == expected


def test_assoc_without_match(run):
    assert run("(ASSOC 'birch '((pine cones) (oak acorns)))") is Atom.NIL


def test_assoc_is_case_sensitive(run):
    assert run("(ASSOC 'OAK '((oak acorns)))") is Atom.NIL


@pytest.mark.parametrize(
    "source, error",
    [
        ("(ASSOC 'oak 'pine_cones)", EvaluationError),
        ("(ASSOC 'oak '(pine cones))", EvaluationError),
        ("(ASSOC 'oak)", WrongArgumentCountError),
    ],
)
def test_bad_assoc(run, source, error):
    with pytest.raises(error):
        run(source)
