import json

from gexpr.types.closure import Builtin, Closure
from gexpr.types.expression import (
    Application,
    Fix,
    Lambda,
    Literal,
    Match,
    Reference,
    Vector,
)
from gexpr.types.pattern import ElsePattern, LiteralPattern, ReferencePattern
from gexpr.types.symbol import Symbol
from gexpr.types.values import GList

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_REFERENCE = "\033[94m"
COLOR_LAMBDA = "\033[92m"
COLOR_BUILTIN = "\033[95m"
COLOR_KEYWORD = "\033[90m"
COLOR_PATTERN = "\033[93m"
COLOR_LITERAL = "\033[36m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_depth": 32,
    "indent": 2,
    "color": True,
}


# ----------------- Colorize utility -----------------
def colorize(text: str, color: str, options: dict = DEFAULT_OPTIONS) -> str:
    if options.get("color", True):
        return f"{color}{text}{RESET}"
    return text


# ----------------- Values -----------------
def format_value(value) -> str:
    """Render an unfurled value on one line."""
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if value is None:
        return "nil"
    if isinstance(value, Symbol):
        return f"'{value.name}"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, GList):
        return "(" + " ".join(format_value(v) for v in value) + ")"
    if isinstance(value, (Closure, Builtin)):
        return str(value)
    return str(value)


def format_pattern(pattern, options: dict = DEFAULT_OPTIONS) -> str:
    if isinstance(pattern, ElsePattern):
        return colorize("else", COLOR_PATTERN, options)
    if isinstance(pattern, ReferencePattern):
        return colorize(pattern.name, COLOR_PATTERN, options)
    if isinstance(pattern, LiteralPattern):
        return colorize(format_value(pattern.value), COLOR_PATTERN, options)
    return repr(pattern)


# ----------------- Pretty printer -----------------
def format_expr(expr, options: dict = DEFAULT_OPTIONS, _current_depth: int = 0) -> str:
    """Render an expression as an indented tree, one node per line."""
    return "\n".join(_tree_lines(expr, {**DEFAULT_OPTIONS, **options}, _current_depth))


def _tree_lines(expr, options: dict, depth: int) -> list[str]:
    pad = " " * (options["indent"] * depth)
    if depth >= options["max_depth"]:
        return [pad + "…"]

    def children(*exprs) -> list[str]:
        lines = []
        for child in exprs:
            lines.extend(_tree_lines(child, options, depth + 1))
        return lines

    match expr:
        case Literal(value=value):
            return [pad + colorize("lit", COLOR_KEYWORD, options) + " "
                    + colorize(format_value(value), COLOR_LITERAL, options)]
        case Reference(name=name):
            return [pad + colorize("ref", COLOR_KEYWORD, options) + " "
                    + colorize(name, COLOR_REFERENCE, options)]
        case Application(fn=fn, arg=arg):
            return [pad + colorize("app", COLOR_KEYWORD, options)] + children(fn, arg)
        case Vector(elements=elements):
            return [pad + colorize(f"vec[{len(elements)}]", COLOR_KEYWORD, options)] + children(*elements)
        case Lambda(params=params, body=body):
            header = colorize("lam", COLOR_LAMBDA, options) + " (" + " ".join(params) + ")"
            return [pad + header] + children(body)
        case Fix(fn=fn):
            return [pad + colorize("fix", COLOR_KEYWORD, options)] + children(fn)
        case Match(scrutinee=scrutinee, branches=branches):
            lines = [pad + colorize("match", COLOR_KEYWORD, options)] + children(scrutinee)
            branch_pad = " " * (options["indent"] * (depth + 1))
            for pattern, body in branches:
                lines.append(branch_pad + "| " + format_pattern(pattern, options) + " =>")
                lines.extend(_tree_lines(body, options, depth + 2))
            return lines
    return [pad + repr(expr)]
