"""Genesis axiom table: the primitive builtins that seed every environment.

Each native function receives the positional argument list and performs its
own arity and type checks, raising BuiltinError with its own message.
"""
from __future__ import annotations

from typing import Callable

from gexpr import Value
from gexpr.errors import BuiltinError
from gexpr.types.closure import Builtin
from gexpr.types.environment import Environment
from gexpr.types.values import GList, is_number, values_equal


# -------------------------------
# Construction and deconstruction
# -------------------------------
def cons(args: list[Value]) -> GList:
    """(cons a b) => (a b). Exactly 2 arguments."""
    if len(args) != 2:
        raise BuiltinError("cons requires exactly 2 arguments")
    return GList(args)


def car(args: list[Value]) -> Value:
    """First element of a single non-empty list."""
    if len(args) == 1 and isinstance(args[0], GList) and args[0]:
        return args[0][0]
    raise BuiltinError("car requires a non-empty list")


def cdr(args: list[Value]) -> GList:
    """All but the first element of a single non-empty list."""
    if len(args) == 1 and isinstance(args[0], GList) and args[0]:
        return GList(args[0][1:])
    raise BuiltinError("cdr requires a non-empty list")


def identity(args: list[Value]) -> Value:
    if len(args) != 1:
        raise BuiltinError("id requires 1 argument")
    return args[0]


def eq(args: list[Value]) -> bool:
    """Structural equality of exactly 2 values; 1 and 1.0 are not eq?."""
    if len(args) != 2:
        raise BuiltinError("eq? requires 2 arguments")
    return values_equal(args[0], args[1], strict=True)


def cond(args: list[Value]) -> Value:
    """(cond flag then else): select by a boolean flag.

    Both branch values arrive already evaluated; cond only chooses.
    """
    if len(args) == 3 and isinstance(args[0], bool):
        flag, then_val, else_val = args
        return then_val if flag else else_val
    raise BuiltinError("cond requires 3 arguments [bool, then, else]")


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def binary_numeric(name: str, op: Callable[[Value, Value], Value]) -> Callable[[list[Value]], Value]:
    """Wrap `op` as a builtin taking exactly 2 numbers."""

    def native(args: list[Value]) -> Value:
        if len(args) != 2 or not all(is_number(a) for a in args):
            raise BuiltinError(f"{name} requires exactly 2 numbers")
        return op(args[0], args[1])

    native.__name__ = f"builtin_{name}"
    return native


add = binary_numeric("+", lambda a, b: a + b)
sub = binary_numeric("-", lambda a, b: a - b)
mul = binary_numeric("*", lambda a, b: a * b)
lte = binary_numeric("<=", lambda a, b: a <= b)


AXIOMS: tuple[tuple[str, Callable[[list[Value]], Value]], ...] = (
    ("cons", cons),
    ("car", car),
    ("cdr", cdr),
    ("id", identity),
    ("eq?", eq),
    ("cond", cond),
    ("+", add),
    ("-", sub),
    ("*", mul),
    ("<=", lte),
)


def genesis_bindings() -> dict[str, Builtin]:
    """Fresh name -> Builtin mapping for the axiom table."""
    return {name: Builtin(name, fn) for name, fn in AXIOMS}


def genesis_environment() -> Environment:
    """Return a new environment holding only the axioms.

    Every call builds a fresh environment; there is no shared singleton.
    """
    return Environment(genesis_bindings())
