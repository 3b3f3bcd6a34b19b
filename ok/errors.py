from __future__ import annotations


class OkError(Exception):
    """ Base class for all ok errors"""
    pass


class OkSyntaxError(OkError):
    """ Raised when source text cannot be lexed or parsed"""

    def __init__(self, message: str, source: str = "<input>", line: int = 1, column: int = 1):
        super().__init__(f"{source}:{line}:{column}: {message}")
        self.message = message
        self.source = source
        self.line = line
        self.column = column


class OkNotCallable(OkError):
    """ Raised when a call's callee is neither callable nor an expander"""

    def __init__(self, value):
        super().__init__(f"{value} is not callable")
        self.value = value


class OkArityError(OkError):
    """ Raised when a form or builtin receives the wrong number of arguments"""


class OkTypeError(OkError):
    """ Raised when arguments have the wrong shape or type"""


class OkRuntimeError(OkError):
    """ Raised by native builtins for failures such as division by zero"""


class OkStackExhausted(OkError):
    """ Raised when nested calls exceed the configured depth"""
