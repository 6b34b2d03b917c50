"""Branch selection for Match expressions."""

from __future__ import annotations

from typing import Sequence

from gexpr import Value
from gexpr.errors import NoMatchingPattern
from gexpr.types.expression import Expression
from gexpr.types.pattern import Pattern, LiteralPattern, ReferencePattern, ElsePattern
from gexpr.types.values import values_equal


def pattern_matches(pattern: Pattern, value: Value) -> bool:
    match pattern:
        case LiteralPattern(value=expected):
            return values_equal(value, expected)
        case ReferencePattern() | ElsePattern():
            return True
    raise TypeError(f"Not a pattern: {pattern!r}")


def select_branch(value: Value, branches: Sequence[tuple[Pattern, Expression]]) -> Expression:
    """Return the body of the first branch whose pattern accepts `value`.

    Branches are tried in source order. ReferencePattern does not bind its
    name: the caller evaluates the body in the environment of the Match.
    """
    for pattern, body in branches:
        if pattern_matches(pattern, value):
            return body
    raise NoMatchingPattern(value)
