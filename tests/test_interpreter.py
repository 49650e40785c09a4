import logging

import pytest

import conslisp
from conslisp.diagnostics import Diagnostics
from conslisp.errors import EvaluationError, ParseError
from conslisp.interpreter import Interpreter
from conslisp.types.atom import Atom
from conslisp.types.environment import Environment


# -----------------------------------------------------
# Session
# -----------------------------------------------------

def test_name_and_version(interp):
    assert interp.name == "conslisp"
    assert interp.version == conslisp.__version__
    assert "conslisp" in repr(interp)


def test_package_exports():
    assert conslisp.Interpreter is Interpreter
    assert issubclass(conslisp.WrongArgumentCountError, conslisp.EvaluationError)
    assert issubclass(conslisp.ParseError, conslisp.ConsLispError)


def test_shares_environment_diagnostics():
    diagnostics = Diagnostics()
    env = Environment(diagnostics=diagnostics)
    interp = Interpreter(env=env)
    assert interp.diagnostics is diagnostics
    assert interp.env is env


def test_eval_returns_last_value(interp):
    assert interp.eval("(SETQ X 2) (+ X 3)") == Atom.create(5)
    assert interp.last_result == Atom.create(5)


def test_eval_across_lines(interp):
    assert interp.eval("(+ 1") is None
    assert interp.pending
    assert interp.eval("   2") is None
    assert interp.eval(")") == Atom.create(3)
    assert not interp.pending


def test_eval_ignores_comments(interp):
    assert interp.eval("(+ 1 2) ; three") == Atom.create(3)


def test_eval_propagates_errors(interp):
    with pytest.raises(EvaluationError):
        interp.eval("(CAR 'A)")
    assert not interp.pending
    assert interp.eval("(CAR '(A))") == Atom.create("A")


def test_eval_propagates_parse_errors(interp):
    with pytest.raises(ParseError):
        interp.eval("(A . B)")
    with pytest.raises(ParseError):
        interp.eval(")")
    assert not interp.pending


def test_reset_discards_partial_input(interp):
    interp.eval("(+ 1")
    interp.reset()
    assert not interp.pending
    assert interp.eval("(+ 2 2)") == Atom.create(4)


# -----------------------------------------------------
# Console entry point
# -----------------------------------------------------

def test_offer_blank(interp):
    assert interp.offer("") is True
    assert interp.offer("   ") is True
    assert interp.offer("; just a comment") is True


def test_offer_incomplete_then_complete(interp):
    assert interp.offer("(") is None
    assert interp.offer("+ 1 2") is None
    assert interp.offer(")") is True
    assert interp.last_result == Atom.create(3)


def test_offer_reports_errors(interp, diagnostics):
    assert interp.offer("+ 1 2 A") is False
    assert len(diagnostics.errors) == 1


def test_offer_recovers_after_error(interp, diagnostics):
    assert interp.offer("(+ 1 2 'A)") is False
    assert interp.offer("(+ 1 2 3)") is True
    assert interp.last_result == Atom.create(6)
    assert diagnostics.errors == ["Can't convert string literal to number"]


def test_offer_mismatched_paren(interp, diagnostics):
    assert interp.offer("(+ 1 2))") is False
    assert "Mismatched parentheses" in diagnostics.errors[0]
    assert not interp.pending


def test_offer_logs_errors(interp, caplog):
    with caplog.at_level(logging.ERROR, logger="conslisp"):
        interp.offer("(QUOTIENT 7 0)")
    assert "/ by zero" in caplog.text


# -----------------------------------------------------
# Programs
# -----------------------------------------------------

def test_defun_and_call(interp):
    assert interp.eval("(DEFUN square (x) (* x x))") == Atom.create("square")
    assert interp.eval("(square 4)") == Atom.create(16)


def test_recursive_function(interp):
    interp.eval("(DEFUN fact (n) (IF (ZEROP n) 1 (* n (fact (- n 1)))))")
    assert interp.eval("(fact 5)") == Atom.create(120)
    assert interp.env.scope_count == 0


def test_multi_line_program(interp):
    program = [
        "(DEFUN sum-list (items)",
        "  (COND ((EQUAL items '()) 0)",
        "        (T (+ (CAR items) (sum-list (CDR items))))))",
    ]
    for line in program[:-1]:
        assert interp.offer(line) is None
    assert interp.offer(program[-1]) is True
    assert interp.eval("(sum-list '(1 2 3 4))") == Atom.create(10)


def test_runaway_recursion(diagnostics):
    interp = Interpreter(diagnostics=diagnostics, max_depth=50)
    interp.eval("(DEFUN forever (n) (forever n))")
    assert interp.offer("(forever 1)") is False
    assert "depth" in diagnostics.errors[0]
    assert interp.env.scope_count == 0


# -----------------------------------------------------
# EXPECT
# -----------------------------------------------------

def test_expect_pass(interp, diagnostics):
    assert interp.eval("(EXPECT (+ 1 2) 3)") is Atom.T
    assert diagnostics.warnings == []


def test_expect_fail(interp, diagnostics):
    assert interp.eval("(EXPECT (+ 1 2) 4)") is Atom.F
    assert diagnostics.warnings == ["Expected 4, got 3"]


def test_expect_lists(interp, diagnostics):
    assert interp.eval("(EXPECT (LIST 1 2) '(1 2))") is Atom.T
    assert interp.eval("(EXPECT (CDR '(1 2)) '(1 2))") is Atom.F
    assert diagnostics.warnings == ["Expected ( 1 2 ), got ( 2 )"]


def test_expect_warning_is_logged(interp, caplog):
    with caplog.at_level(logging.WARNING, logger="conslisp"):
        interp.eval("(EXPECT 1 2)")
    assert "Expected 2, got 1" in caplog.text
