"""The seven G-Expression node kinds.

Nodes are frozen dataclasses; sequence fields are normalised to tuples so a
node can be embedded in any number of closures without being copied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from gexpr import Value
from gexpr.types.pattern import Pattern


@dataclass(frozen=True)
class Literal:
    value: Value


@dataclass(frozen=True)
class Reference:
    name: str


@dataclass(frozen=True)
class Application:
    fn: Expression
    arg: Expression


@dataclass(frozen=True)
class Vector:
    elements: tuple[Expression, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))


@dataclass(frozen=True)
class Lambda:
    params: tuple[str, ...]
    body: Expression

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(self.params))


@dataclass(frozen=True)
class Fix:
    fn: Expression


@dataclass(frozen=True)
class Match:
    scrutinee: Expression
    branches: tuple[tuple[Pattern, Expression], ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(
            self, "branches", tuple((pattern, body) for pattern, body in self.branches)
        )


Expression = Union[Literal, Reference, Application, Vector, Lambda, Fix, Match]

EXPRESSION_TYPES = (Literal, Reference, Application, Vector, Lambda, Fix, Match)


# --- Constructor shorthands ---
def lit(value: Value) -> Literal:
    return Literal(value)


def ref(name: str) -> Reference:
    return Reference(name)


def app(fn: Expression, arg: Expression) -> Application:
    return Application(fn, arg)


def vec(*elements: Expression) -> Vector:
    return Vector(elements)


def lam(params: Iterable[str], body: Expression) -> Lambda:
    return Lambda(tuple(params), body)


def fix(fn: Expression) -> Fix:
    return Fix(fn)


def match(scrutinee: Expression, *branches: tuple[Pattern, Expression]) -> Match:
    return Match(scrutinee, branches)


def call(name: str, *args: Expression) -> Application:
    """(name args...) as an Application of a Reference to a Vector."""
    return Application(Reference(name), Vector(args))
