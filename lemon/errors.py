from __future__ import annotations

from typing import Any


class LemonError(Exception):
    """ Base class for all Lemon errors"""
    pass

class LemonUndefinedVariable(LemonError):
    """ Raised when a symbol is looked up or updated before it is defined"""

    def __init__(self, name: str):
        super().__init__(f"Undefined variable: {name}")
        self.name = name

class LemonEmptyList(LemonError):
    """ Raised when an empty list appears where a call, body or parameter list is required"""

    def __init__(self, message: str = "Empty list"):
        super().__init__(message)

class LemonNonCallableValue(LemonError):
    """ Raised when the head of a call is not a function"""

    def __init__(self, value: Any):
        from lemon.types.printer import to_string
        super().__init__(f"Non-callable value: {to_string(value)}")
        self.value = value

class LemonArityError(LemonError):
    """ Raised when the number of arguments passed to a function or special form is incorrect"""

    def __init__(self, expected: int, found: int, what: str | None = None):
        prefix = f"{what}: " if what else ""
        super().__init__(f"{prefix}Invalid arity: expected {expected}, found {found}")
        self.expected = expected
        self.found = found

class LemonTypeError(LemonError):
    """ Raised when a value of the wrong shape is passed to a special form or builtin"""

    def __init__(self, expected: str, found: Any):
        from lemon.types.printer import to_string
        super().__init__(f"Type error: expected {expected}, found {to_string(found)}")
        self.expected = expected
        self.found = found

class LemonDivideByZero(LemonError):
    """ Raised when a divisor is zero"""

    def __init__(self):
        super().__init__("Divide by zero")

class LemonInvalidClosure(LemonError):
    """ Raised when a closure's defining environment no longer exists"""

    def __init__(self, name: str | None = None):
        label = f" {name}" if name else ""
        super().__init__(f"Invalid closure{label}: its defining environment has been released")
        self.name = name

class LemonSyntaxError(LemonError):
    """ Raised when source text cannot be turned into expressions"""

class LemonTokenizeError(LemonSyntaxError):
    """ Raised by the lexer on characters it cannot tokenize"""

class LemonParseError(LemonSyntaxError):
    """ Raised by the parser on a malformed token sequence"""
