"""Runtime environment for G-Expressions.

The Environment is an immutable mapping from names to unfurled values. It is
never mutated and has no `outer` link: extending it produces a new map with
the new bindings merged flat on top of the old ones, so a closure's captured
environment stays exactly as it was when its Lambda was evaluated.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

from gexpr import Value
from gexpr.errors import UndefinedReference

Bindings = Union[Mapping[str, Value], Iterable[tuple[str, Value]]]


class Environment:
    """Immutable name -> value map with flat-overlay extension."""

    __slots__ = ("_vars",)

    def __init__(self, bindings: Optional[Bindings] = None):
        vars_: dict[str, Value] = dict(bindings) if bindings is not None else {}
        for name in vars_:
            if not isinstance(name, str):
                raise TypeError(f"Cannot bind {name!r}: names must be strings")
        object.__setattr__(self, "_vars", MappingProxyType(vars_))

    def __setattr__(self, key, value):
        raise AttributeError("Environment is immutable")

    @property
    def vars(self) -> Mapping[str, Value]:
        """Read-only view of the bindings."""
        return self._vars

    def lookup(self, name: str) -> Value:
        """Return the value bound to `name`; raise UndefinedReference if absent."""
        try:
            return self._vars[name]
        except KeyError:
            raise UndefinedReference(name) from None

    def get(self, name: str, default: Value = None) -> Value:
        return self._vars.get(name, default)

    def extend(self, bindings: Bindings) -> Environment:
        """Return a new environment with `bindings` overlaid on this one.

        Later bindings win; the receiver is left untouched.
        """
        merged = dict(self._vars)
        merged.update(bindings)
        return Environment(merged)

    def define(self, name: str, value: Value) -> Environment:
        """Return a new environment with the single binding `name` -> `value`."""
        return self.extend({name: value})

    def names(self) -> list[str]:
        return list(self._vars)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._vars.keys() == other._vars.keys() and all(
            self._vars[k] is other._vars[k] or self._vars[k] == other._vars[k]
            for k in self._vars
        )

    __hash__ = None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self._vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        # Closures capture environments, so print names only to avoid deep recursion
        return f"<Environment names={sorted(self._vars)}>"
