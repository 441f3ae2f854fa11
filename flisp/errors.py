class FlispError(Exception):
    """ Base class for all flisp errors"""
    pass


class LexError(FlispError):
    """ Raised when the source text cannot be tokenized"""

    def __init__(self, message: str, line: int):
        super().__init__(f"{message} at line {line}")
        self.message = message
        self.line = line


class ParseError(FlispError):
    """ Raised when the token stream does not form a valid program"""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message if line is None else f"{message} at line {line}")
        self.message = message
        self.line = line


class SemanticError(FlispError):
    """ Raised when an operand count or operand shape is invalid"""

    def __init__(self, message: str, path: str):
        super().__init__(f"{message} at {path}")
        self.message = message
        self.path = path


class FlispRuntimeError(FlispError):
    """ Base class for errors raised while evaluating a program"""


class UndefinedVariable(FlispRuntimeError):
    """ Raised when a name is looked up before it is bound"""


class UndefinedFunction(FlispRuntimeError):
    """ Raised when a call names a function that is not bound"""


class SelfReferentialVariable(FlispRuntimeError):
    """ Raised when a variable is bound to an atom naming itself"""


class ArityError(FlispRuntimeError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class FlispTypeError(FlispRuntimeError):
    """ Raised when the types of operands are incorrect"""


class DivisionByZero(FlispRuntimeError):
    """ Raised when dividing by zero"""


class EmptyListError(FlispRuntimeError):
    """ Raised when taking the head or tail of an empty list"""


class UnknownOperator(FlispRuntimeError):
    """ Raised when an operator or special form name is not recognised"""


class ResourceExhausted(FlispRuntimeError):
    """ Raised when evaluation recurses deeper than the configured limit"""
