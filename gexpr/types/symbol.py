from __future__ import annotations
import sys


class Symbol:
    """An atom value; interned so equal names share one string."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(name))

    def __setattr__(self, key, value):
        raise AttributeError("Symbol is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("symbol", self.name))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
