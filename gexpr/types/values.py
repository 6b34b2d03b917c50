"""List values and structural equality for unfurled values."""

from __future__ import annotations

from gexpr import Value


class GList(tuple):
    """Immutable list value produced by Vector evaluation and list builtins."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"GList({list(self)!r})"


def is_number(value: Value) -> bool:
    # bool is an int subclass but not a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def values_equal(a: Value, b: Value, strict: bool = False) -> bool:
    """Structural equality: element-wise for lists, booleans never equal numbers.

    With `strict`, numbers must also share a type, so 1 and 1.0 differ.
    """
    if a is b:
        return True
    if isinstance(a, GList) and isinstance(b, GList):
        if len(a) != len(b):
            return False
        return all(values_equal(x, y, strict) for x, y in zip(a, b))
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        if strict and type(a) is not type(b):
            return False
        return a == b
    if type(a) != type(b):
        return False
    return a == b
