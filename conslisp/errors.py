

class ConsLispError(Exception):
    """ Base class for all conslisp errors"""
    pass

class ParseError(ConsLispError):
    """ Raised when text or tokens cannot be turned into a parse tree"""
    pass

class TypeConversionError(ConsLispError):
    """ Raised when a value cannot be coerced to the requested type"""
    pass

class EvaluationError(ConsLispError):
    """ Raised when evaluation breaks a runtime rule"""

class WrongArgumentCountError(EvaluationError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class UndefinedSymbolError(EvaluationError):
    """ Raised when a name is neither a function nor a bound symbol"""

class RecursionDepthError(ConsLispError):
    """ Raised when evaluation nests deeper than the interpreter allows"""
