from gexpr.builtin.genesis import genesis_environment
from gexpr.debug_utils.pprint import RESET, format_expr, format_value
from gexpr.evaluation.evaluator import evaluate
from gexpr.types import GList, Symbol
from gexpr.types.expression import Fix, Literal, Match, call, lam, ref
from gexpr.types.pattern import ELSE, LiteralPattern, ReferencePattern

PLAIN = {"color": False}


def test_format_value():
    assert format_value(True) == "#t"
    assert format_value(False) == "#f"
    assert format_value(None) == "nil"
    assert format_value(42) == "42"
    assert format_value("hi") == '"hi"'
    assert format_value(Symbol("a")) == "'a"
    assert format_value(GList([1, GList([True, "x"])])) == '(1 (#t "x"))'


def test_format_function_values():
    env = genesis_environment()
    assert format_value(env.lookup("cons")) == "<builtin cons>"
    closure = evaluate(lam(["x", "y"], ref("x")), env)
    assert format_value(closure) == "<closure (x y)>"


def test_format_expr_tree():
    expr = call("+", Literal(1), ref("x"))
    assert format_expr(expr, PLAIN) == "\n".join([
        "app",
        "  ref +",
        "  vec[2]",
        "    lit 1",
        "    ref x",
    ])


def test_format_lambda_fix_and_match():
    expr = Fix(lam(["f"], Match(ref("n"), [
        (LiteralPattern(0), Literal("zero")),
        (ReferencePattern("m"), ref("m")),
        (ELSE, Literal(None)),
    ])))
    assert format_expr(expr, PLAIN) == "\n".join([
        "fix",
        "  lam (f)",
        "    match",
        "      ref n",
        "      | 0 =>",
        '        lit "zero"',
        "      | m =>",
        "        ref m",
        "      | else =>",
        "        lit nil",
    ])


def test_format_expr_depth_limit():
    expr = call("f", call("g", Literal(1)))
    lines = format_expr(expr, {"color": False, "max_depth": 2}).splitlines()
    assert lines == ["app", "  ref f", "  vec[1]", "    …"]


def test_colored_output_resets():
    out = format_expr(ref("x"))
    assert out.endswith(RESET)
    assert "x" in out
