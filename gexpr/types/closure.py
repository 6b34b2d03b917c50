"""Callable values: closures created by Lambda, native builtins and the Fix unfolding."""

from __future__ import annotations

from io import StringIO

from gexpr import NativeFn
from gexpr.types.environment import Environment


class Closure:
    """A Lambda paired with the environment active where it was evaluated."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params, body, env: Environment):
        object.__setattr__(self, "params", tuple(params))
        object.__setattr__(self, "body", body)
        # Shared, never copied: the environment is immutable
        object.__setattr__(self, "env", env)

    def __setattr__(self, key, value):
        raise AttributeError("Closure is immutable")

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<closure (")
            buffer.write(" ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Closure(params={list(self.params)!r}, body={self.body!r})"


class Builtin:
    """A named native function taking the positional argument list."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "fn", fn)

    def __setattr__(self, key, value):
        raise AttributeError("Builtin is immutable")

    def __call__(self, args: list):
        return self.fn(args)

    def __str__(self) -> str:
        return f"<builtin {self.name}>"

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"


class FixUnfolding(Builtin):
    """The `fix` argument handed to f when Fix(f) is unfurled.

    Holds the Fix node and the environment it was unfurled in, nothing else.
    The applier unfurls the node again on every call, under the step budget
    of whoever makes the call.
    """

    __slots__ = ("node", "env")

    def __init__(self, node, env: Environment):
        super().__init__("fix", self._call)
        object.__setattr__(self, "node", node)
        object.__setattr__(self, "env", env)

    def _call(self, args: list):
        # Native callers carry no budget
        from gexpr.evaluation.apply import apply
        return apply(self, args)

    def __repr__(self) -> str:
        return f"FixUnfolding({self.node!r})"
