"""Parser: token sequences to parse trees.

Each top-level form becomes one PTree. A lone atom becomes a storage cell;
a parenthesised group is built with an explicit stack of partial trees, one
per open paren. Closing a nested group splices the finished tree into its
parent as a sublist node.

Dotted pairs are read when the tail is a list or NIL: `(A . (B C))` is the
list `(A B C)` and `(A . NIL)` is `(A)`.
"""

from __future__ import annotations

from typing import Iterable

from conslisp.errors import ParseError
from conslisp.reader.grammar import DOT, LPAREN, NIL, OPERATOR_SYMBOLS, RPAREN, is_numeric
from conslisp.reader.lexer import Lexer
from conslisp.reader.quote import expand_quotes
from conslisp.types.atom import Atom
from conslisp.types.cell import Cell, Ref
from conslisp.types.nil import NIL_REF
from conslisp.types.ptree import PTree

# Per-level state while reading a dotted pair.
_LIST, _AFTER_DOT, _TAIL_READ = range(3)


def parse_token(token: str) -> Ref:
    """Classify one atomic token: integer, NIL, operator symbol, else literal."""
    if is_numeric(token):
        return Atom.create(int(token))
    if token.upper() == NIL:
        return NIL_REF
    if token in OPERATOR_SYMBOLS:
        return Atom.symbol(token)
    return Atom.create(token)


def _split_forms(tokens: list[str]) -> list[list[str]]:
    forms: list[list[str]] = []
    current: list[str] = []
    depth = 0
    for token in tokens:
        if token == LPAREN:
            depth += 1
        elif token == RPAREN:
            depth -= 1
            if depth < 0:
                raise ParseError("Mismatched parentheses")
        current.append(token)
        if depth == 0:
            forms.append(current)
            current = []
    if depth != 0:
        raise ParseError("Mismatched parentheses")
    return forms


class Parser:
    def parse(self, tokens: Iterable[str]) -> PTree | None:
        """Parse exactly one form; None for an empty token sequence."""
        forms = self.parse_all(tokens)
        if not forms:
            return None
        if len(forms) > 1:
            raise ParseError("Unexpected tokens after end of expression")
        return forms[0]

    def parse_all(self, tokens: Iterable[str]) -> list[PTree]:
        """Parse a token sequence holding any number of top-level forms."""
        return [self._parse_form(form) for form in _split_forms(expand_quotes(tokens))]

    def _parse_form(self, tokens: list[str]) -> PTree:
        if len(tokens) == 1:
            if tokens[0] == DOT:
                raise ParseError("Unexpected '.'")
            return PTree(Cell.create_storage(parse_token(tokens[0])))
        return self._parse_list(tokens)

    def _parse_list(self, tokens: list[str]) -> PTree:
        stack: list[tuple[PTree, int]] = []
        tree = PTree()
        state = _LIST
        depth = 0

        for token in tokens:
            if state == _TAIL_READ and token != RPAREN:
                raise ParseError(f"Expected ')' after dotted pair, found '{token}'")

            if token == LPAREN:
                if depth > 0:
                    stack.append((tree, state))
                    tree = PTree()
                    state = _LIST
                depth += 1
            elif token == RPAREN:
                if state == _AFTER_DOT:
                    raise ParseError("Missing expression after '.'")
                depth -= 1
                if stack:
                    child = tree
                    tree, state = stack.pop()
                    if state == _AFTER_DOT:
                        tree.splice(child.root)
                        state = _TAIL_READ
                    else:
                        tree.add_list(child.root)
                else:
                    state = _LIST
            elif token == DOT:
                if state != _LIST or tree.is_empty():
                    raise ParseError("Unexpected '.'")
                state = _AFTER_DOT
            else:
                ref = parse_token(token)
                if state == _AFTER_DOT:
                    if ref is not NIL_REF:
                        raise ParseError(f"Dotted pair tail must be a list or NIL, found '{token}'")
                    state = _TAIL_READ
                else:
                    tree.add(Cell.create(ref))

        if depth != 0:
            raise ParseError("Mismatched parentheses")
        return tree


def parse(text: str) -> PTree | None:
    """Lex and parse one complete form."""
    return Parser().parse(Lexer(text).tokens)


def parse_all(text: str) -> list[PTree]:
    return Parser().parse_all(Lexer(text).tokens)
