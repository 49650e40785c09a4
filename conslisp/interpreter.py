"""Interpreter session: lexer, parser and evaluator over one Environment.

Text can arrive a line at a time. Until the lexer holds a balanced form,
`eval` and `offer` return None and keep the partial input; once it is
complete every form in it is parsed and evaluated in order.
"""

from __future__ import annotations

import logging

from conslisp import __version__
from conslisp.diagnostics import Diagnostics
from conslisp.errors import ConsLispError
from conslisp.evaluation.evaluator import Evaluator
from conslisp.reader.lexer import Lexer
from conslisp.reader.parser import Parser
from conslisp.types.environment import Environment
from conslisp.types.sexpression import SExpression

logger = logging.getLogger(__name__)


class Interpreter:
    name = "conslisp"

    def __init__(
        self,
        env: Environment | None = None,
        diagnostics: Diagnostics | None = None,
        max_depth: int | None = None,
    ):
        if diagnostics is None:
            diagnostics = env.diagnostics if env is not None else Diagnostics()
        self.diagnostics = diagnostics
        self.env = env if env is not None else Environment(diagnostics=diagnostics)
        self.evaluator = Evaluator(self.env, max_depth)
        self.lexer = Lexer()
        self.parser = Parser()
        self.last_result: SExpression | None = None

    @property
    def version(self) -> str:
        return __version__

    @property
    def pending(self) -> bool:
        """True while a partial form is waiting for more input."""
        return self.lexer.pending

    def reset(self) -> None:
        """Discard any partial input."""
        self.lexer.reset()

    def eval(self, text: str) -> SExpression | None:
        """Feed text; evaluate once it completes a form and return the last value.

        Errors propagate to the caller. The lexer is cleared before parsing,
        so a failing form never affects the next input.
        """
        self.lexer.append(text)
        if not self.lexer.is_complete():
            return None
        tokens = self.lexer.tokens
        self.lexer.reset()
        result = None
        for tree in self.parser.parse_all(tokens):
            logger.debug("Evaluating %s", tree.unparse())
            result = self.evaluator.evaluate(tree)
        self.last_result = result
        return result

    def offer(self, text: str) -> bool | None:
        """Console-style entry point.

        Returns None while more input is needed, True when the input was
        evaluated (or was blank), and False after an error, which is
        reported to the diagnostics sink instead of raised.
        """
        try:
            result = self.eval(text)
        except ConsLispError as e:
            self.diagnostics.error(str(e))
            self.reset()
            return False
        if result is None and self.pending:
            return None
        return True

    def __repr__(self) -> str:
        return f"<Interpreter {self.name} {self.version}>"
