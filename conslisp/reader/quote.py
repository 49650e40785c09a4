"""Expansion of the `'` shorthand into explicit QUOTE forms.

    'A          ->  ( QUOTE A )
    '(A B)      ->  ( QUOTE ( A B ) )

The expander sees one token at a time and keeps the paren depth of the
stream it emits. At a `'` it snapshots the depth, emits `( QUOTE` and waits
for the quoted expression: an atom is closed straight away, a list is
closed when the depth falls back to the snapshot. An explicit `( QUOTE`
opens a quote region too. Inside a region a `'` is an ordinary atom, so
`'(A 'B)` quotes the three-element list `( A ' B )`.
"""

from __future__ import annotations

from conslisp.errors import ParseError
from conslisp.reader.grammar import LPAREN, QUOTE, RPAREN


class QuoteExpander:
    __slots__ = ("depth", "in_quote", "quote_depth", "expect_atom", "_shorthand", "_previous")

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.depth = 0
        self.in_quote = False
        self.quote_depth = 0
        self.expect_atom = False
        # True when the open region came from `'` and needs a synthetic `)`.
        self._shorthand = False
        self._previous: str | None = None

    def push(self, token: str) -> list[str]:
        """Feed one raw token, returning the tokens to emit in its place."""
        out = self._expand(token)
        if out:
            self._previous = out[-1]
        return out

    def _expand(self, token: str) -> list[str]:
        if token == QUOTE and not self.in_quote:
            self.in_quote = True
            self._shorthand = True
            self.quote_depth = self.depth
            self.expect_atom = True
            self.depth += 1
            return [LPAREN, "QUOTE"]

        if token == LPAREN:
            self.expect_atom = False
            self.depth += 1
            return [LPAREN]

        if token == RPAREN:
            if self.expect_atom:
                raise ParseError("Quote must be followed by an expression")
            self.depth -= 1
            if self.depth < 0:
                raise ParseError("Mismatched parentheses")
            if self.in_quote and self._shorthand and self.depth == self.quote_depth + 1:
                self._close()
                self.depth -= 1
                return [RPAREN, RPAREN]
            if self.in_quote and not self._shorthand and self.depth == self.quote_depth:
                self._close()
            return [RPAREN]

        if (
            not self.in_quote
            and self._previous == LPAREN
            and token.upper() == "QUOTE"
        ):
            self.in_quote = True
            self._shorthand = False
            self.quote_depth = self.depth - 1
            return [token]

        if self.expect_atom:
            self._close()
            self.depth -= 1
            return [token, RPAREN]
        return [token]

    def _close(self) -> None:
        self.in_quote = False
        self.expect_atom = False
        self._shorthand = False


def expand_quotes(tokens) -> list[str]:
    """Expand every `'` shorthand in a complete token sequence."""
    expander = QuoteExpander()
    out: list[str] = []
    for token in tokens:
        out.extend(expander.push(token))
    return out
