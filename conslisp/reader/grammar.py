"""Token grammar.

    s_expression := atom | "(" s_expression "." s_expression ")" | list
    list         := "(" s_expression* ")"
    atom         := integer | identifier | operator

Integers are `[+-]?\\d+`, identifiers `[A-Za-z0-9][A-Za-z0-9_-]*` and
operators one of `+ - * / % < > =`. Whitespace separates tokens and `;`
starts a comment that runs to the end of the line.
"""

from __future__ import annotations

import re

LPAREN = "("
RPAREN = ")"
DOT = "."
QUOTE = "'"
NIL = "NIL"

TOKEN_RE = re.compile(
    r"(?P<space>\s+)"
    r"|(?P<comment>;[^\n]*)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<dot>\.)"
    r"|(?P<quote>')"
    r"|(?P<number>[+-]\d+)"  # unsigned numbers are read as identifiers
    r"|(?P<identifier>[A-Za-z0-9][A-Za-z0-9_-]*)"
    r"|(?P<operator>[-+*/%<>=])"
)

INTEGER_RE = re.compile(r"[+-]?\d+")
LEGAL_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")

# Only these operators are read as symbols; the rest stay plain literals
# and are resolved through their function bindings.
OPERATOR_SYMBOLS = frozenset({"+", "*"})


def is_numeric(token: str) -> bool:
    return INTEGER_RE.fullmatch(token) is not None


def is_legal_name(name: str) -> bool:
    """True for names usable by DEFUN for functions and parameters."""
    return LEGAL_NAME_RE.fullmatch(name) is not None
