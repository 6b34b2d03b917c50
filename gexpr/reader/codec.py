"""
  JSON codec for G-Expressions

Maps JSON documents node-kind-for-node-kind onto the expression model. Every
node is an object with a kind tag `g` and a payload `v`:

    - {"g": "lit",   "v": value}
    - {"g": "ref",   "v": "name"}
    - {"g": "app",   "v": {"fn": expr, "args": expr}}
    - {"g": "vec",   "v": [expr, ...]}
    - {"g": "lam",   "v": {"params": ["name", ...], "body": expr}}
    - {"g": "fix",   "v": expr}
    - {"g": "match", "v": {"expr": expr, "branches": [[pattern, expr], ...]}}

Patterns are "else", {"lit": value} or {"ref": "name"}; any other JSON
scalar in pattern position is a literal pattern.

Literal values are JSON scalars, {"symbol": "name"} for atoms and
{"list": [...]} for lists. Closures and builtins have no encoding.
"""

from __future__ import annotations

import json
from typing import Any

from gexpr import Value
from gexpr.errors import CodecError
from gexpr.types.closure import Builtin, Closure
from gexpr.types.expression import (
    Application,
    Expression,
    Fix,
    Lambda,
    Literal,
    Match,
    Reference,
    Vector,
)
from gexpr.types.pattern import ELSE, ElsePattern, LiteralPattern, Pattern, ReferencePattern
from gexpr.types.symbol import Symbol
from gexpr.types.values import GList

_SCALARS = (type(None), bool, int, float, str)


# ----------------- Values -----------------
def encode_value(value: Value) -> Any:
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, Symbol):
        return {"symbol": value.name}
    if isinstance(value, GList):
        return {"list": [encode_value(v) for v in value]}
    if isinstance(value, (Closure, Builtin)):
        raise CodecError(f"Cannot encode function value {value}")
    raise CodecError(f"Cannot encode value {value!r}")


def decode_value(doc: Any) -> Value:
    if isinstance(doc, _SCALARS):
        return doc
    if isinstance(doc, list):
        return GList(decode_value(v) for v in doc)
    if isinstance(doc, dict) and len(doc) == 1:
        if "symbol" in doc and isinstance(doc["symbol"], str):
            return Symbol(doc["symbol"])
        if "list" in doc and isinstance(doc["list"], list):
            return GList(decode_value(v) for v in doc["list"])
    raise CodecError(f"Cannot decode value {doc!r}")


# ----------------- Patterns -----------------
def encode_pattern(pattern: Pattern) -> Any:
    match pattern:
        case ElsePattern():
            return "else"
        case LiteralPattern(value=value):
            return {"lit": encode_value(value)}
        case ReferencePattern(name=name):
            return {"ref": name}
    raise CodecError(f"Cannot encode pattern {pattern!r}")


def decode_pattern(doc: Any) -> Pattern:
    if doc == "else":
        return ELSE
    if isinstance(doc, dict):
        if set(doc) == {"lit"}:
            return LiteralPattern(decode_value(doc["lit"]))
        if set(doc) == {"ref"} and isinstance(doc["ref"], str):
            return ReferencePattern(doc["ref"])
        raise CodecError(f"Cannot decode pattern {doc!r}")
    return LiteralPattern(decode_value(doc))


# ----------------- Expressions -----------------
def encode(expr: Expression) -> dict:
    """Expression -> JSON-compatible document."""
    match expr:
        case Literal(value=value):
            return {"g": "lit", "v": encode_value(value)}
        case Reference(name=name):
            return {"g": "ref", "v": name}
        case Application(fn=fn, arg=arg):
            return {"g": "app", "v": {"fn": encode(fn), "args": encode(arg)}}
        case Vector(elements=elements):
            return {"g": "vec", "v": [encode(e) for e in elements]}
        case Lambda(params=params, body=body):
            return {"g": "lam", "v": {"params": list(params), "body": encode(body)}}
        case Fix(fn=fn):
            return {"g": "fix", "v": encode(fn)}
        case Match(scrutinee=scrutinee, branches=branches):
            return {
                "g": "match",
                "v": {
                    "expr": encode(scrutinee),
                    "branches": [[encode_pattern(p), encode(b)] for p, b in branches],
                },
            }
    raise CodecError(f"Not a G-Expression: {expr!r}")


def _field(payload: Any, key: str, kind: str) -> Any:
    if not isinstance(payload, dict) or key not in payload:
        raise CodecError(f"'{kind}' node requires a '{key}' field")
    return payload[key]


def decode(doc: Any) -> Expression:
    """JSON-compatible document -> Expression."""
    if not isinstance(doc, dict) or "g" not in doc or "v" not in doc:
        raise CodecError(f"Expected a {{'g', 'v'}} node, got {doc!r}")
    kind, payload = doc["g"], doc["v"]

    if kind == "lit":
        return Literal(decode_value(payload))
    if kind == "ref":
        if not isinstance(payload, str):
            raise CodecError(f"'ref' node requires a name, got {payload!r}")
        return Reference(payload)
    if kind == "app":
        return Application(decode(_field(payload, "fn", kind)), decode(_field(payload, "args", kind)))
    if kind == "vec":
        if not isinstance(payload, list):
            raise CodecError(f"'vec' node requires a list, got {payload!r}")
        return Vector(tuple(decode(e) for e in payload))
    if kind == "lam":
        params = _field(payload, "params", kind)
        if not isinstance(params, list) or not all(isinstance(p, str) for p in params):
            raise CodecError(f"'lam' params must be a list of names, got {params!r}")
        return Lambda(tuple(params), decode(_field(payload, "body", kind)))
    if kind == "fix":
        return Fix(decode(payload))
    if kind == "match":
        branches = _field(payload, "branches", kind)
        if not isinstance(branches, list):
            raise CodecError(f"'match' branches must be a list, got {branches!r}")
        decoded = []
        for branch in branches:
            if not isinstance(branch, list) or len(branch) != 2:
                raise CodecError(f"'match' branch must be a [pattern, expr] pair, got {branch!r}")
            decoded.append((decode_pattern(branch[0]), decode(branch[1])))
        return Match(decode(_field(payload, "expr", kind)), tuple(decoded))
    raise CodecError(f"Unknown node kind {kind!r}")


def dumps(expr: Expression, indent: int | None = 2) -> str:
    return json.dumps(encode(expr), indent=indent)


def loads(text: str) -> Expression:
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise CodecError(f"JSON parse error: {e}") from e
    return decode(doc)


def dumps_value(value: Value, indent: int | None = None) -> str:
    return json.dumps(encode_value(value), indent=indent)
