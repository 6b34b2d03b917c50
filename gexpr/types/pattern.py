from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from gexpr import Value


@dataclass(frozen=True)
class LiteralPattern:
    """Matches iff the scrutinee is structurally equal to `value`."""
    value: Value


@dataclass(frozen=True)
class ReferencePattern:
    """Always matches. The name is recorded but not bound in the branch body."""
    name: str


@dataclass(frozen=True)
class ElsePattern:
    """Always matches."""


ELSE = ElsePattern()

Pattern = Union[LiteralPattern, ReferencePattern, ElsePattern]
