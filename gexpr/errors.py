from __future__ import annotations

from typing import Any


class GexprError(Exception):
    """ Base class for all G-Expression errors"""
    pass


class EvalError(GexprError):
    """ Raised when unfurling an expression fails"""
    pass


class UndefinedReference(EvalError):
    """ Raised when a reference names nothing in the environment"""

    def __init__(self, name: str):
        super().__init__(f"Undefined reference: {name}")
        self.name = name


class ArityMismatch(EvalError):
    """ Raised when a closure is applied to the wrong number of arguments"""

    def __init__(self, expected: int, got: int):
        super().__init__(f"Arity mismatch: expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class NotCallable(EvalError):
    """ Raised when a non-function value is applied"""

    def __init__(self, value: Any):
        super().__init__(f"Not a function: {value!r}")
        self.value = value


class NoMatchingPattern(EvalError):
    """ Raised when no match branch accepts the scrutinee"""

    def __init__(self, value: Any):
        super().__init__(f"No matching pattern for value: {value!r}")
        self.value = value


class BuiltinError(EvalError):
    """ Raised by native builtins; the message is the builtin's own"""


class MalformedExpression(EvalError):
    """ Raised when something other than a G-Expression node is evaluated"""

    def __init__(self, expr: Any):
        super().__init__(f"Not a G-Expression: {expr!r}")
        self.expr = expr


class StepLimitExceeded(EvalError):
    """ Raised when an opt-in step budget runs out"""

    def __init__(self, limit: int):
        super().__init__(f"Step limit exceeded: {limit}")
        self.limit = limit


class DefinitionError(GexprError):
    """ Raised when the bootstrap loader cannot define a name"""

    def __init__(self, name: str, cause: EvalError):
        super().__init__(f"Failed to define {name}: {cause}")
        self.name = name
        self.cause = cause


class CodecError(GexprError):
    """ Raised when a document cannot be mapped onto the expression model"""
