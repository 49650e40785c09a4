"""Incremental lexer.

Text arrives in chunks, typically one line at a time from a console. The
lexer keeps its token list and paren depth between chunks, so a front end
can keep appending lines until `is_complete()` reports a balanced form.
Each chunk is assumed to end at a line boundary: a comment stops at the end
of its chunk and no token spans two chunks.
"""

from __future__ import annotations

import logging
from typing import Iterator

from conslisp.errors import ParseError
from conslisp.reader.grammar import TOKEN_RE
from conslisp.reader.quote import QuoteExpander

logger = logging.getLogger(__name__)


def _scan(text: str) -> Iterator[str]:
    pos = 0
    n = len(text)
    while pos < n:
        match = TOKEN_RE.match(text, pos)
        if match is None:
            raise ParseError(f"Unexpected character {text[pos]!r} at position {pos}")
        pos = match.end()
        if match.lastgroup in ("space", "comment"):
            continue
        yield match.group()


class Lexer:
    def __init__(self, text: str | None = None):
        self._tokens: list[str] = []
        self._quotes = QuoteExpander()
        if text is not None:
            self.append(text)

    def append(self, text: str) -> Lexer:
        """Scan another chunk of input onto the accumulated tokens.

        Extra closing parens are unrecoverable: the lexer is reset and a
        ParseError raised, and the caller must resubmit the whole form.
        """
        try:
            for raw in _scan(text):
                self._tokens.extend(self._quotes.push(raw))
        except ParseError as e:
            logger.debug("Lexer reset after error: %s", e)
            self.reset()
            raise
        return self

    def is_complete(self) -> bool:
        return bool(self._tokens) and self._quotes.depth == 0 and not self._quotes.in_quote

    @property
    def pending(self) -> bool:
        """True while tokens are held back waiting for more input."""
        return bool(self._tokens) and not self.is_complete()

    @property
    def depth(self) -> int:
        return self._quotes.depth

    @property
    def tokens(self) -> list[str]:
        return list(self._tokens)

    def reset(self) -> None:
        self._tokens.clear()
        self._quotes.reset()

    def __repr__(self) -> str:
        return f"<Lexer tokens={len(self._tokens)} depth={self.depth}>"


def lex(text: str) -> list[str]:
    """Tokens of a complete piece of text."""
    return Lexer(text).tokens
