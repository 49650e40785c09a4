# conslisp: a small, dynamically scoped LISP built on cons cells.
#
# Everything the reader produces and the evaluator consumes is a graph of
# Cells whose slots hold a Ref: an Atom, another Cell, or the NIL sentinel.
# Evaluated values are S-expressions: an Atom or a List wrapping a Cell chain.

__version__ = "0.4.0"

from conslisp.errors import (  # noqa: E402
    ConsLispError,
    EvaluationError,
    ParseError,
    RecursionDepthError,
    TypeConversionError,
    UndefinedSymbolError,
    WrongArgumentCountError,
)
from conslisp.interpreter import Interpreter  # noqa: E402
