import pytest

from gexpr import errors
from gexpr.evaluation.evaluator import evaluate
from gexpr.types import Builtin, Closure, GList, Symbol
from gexpr.types.expression import Application, Lambda, Literal, Reference, Vector, call, lam, ref


@pytest.mark.parametrize(
    "value",
    [0, 42, -3.5, True, False, None, "hello", Symbol("atom"), GList([1, GList([2])])],
)
def test_literal_evaluates_to_itself(env, value):
    assert evaluate(Literal(value), env) == value


def test_reference_lookup(env):
    assert evaluate(Reference("cons"), env) is env.lookup("cons")
    local = env.define("x", 42)
    assert evaluate(Reference("x"), local) == 42


def test_reference_to_none_value_resolves(env):
    local = env.define("nothing", None)
    assert evaluate(Reference("nothing"), local) is None


def test_undefined_reference(env):
    with pytest.raises(errors.UndefinedReference) as info:
        evaluate(Reference("nope"), env)
    assert info.value.name == "nope"


def test_empty_vector(env):
    assert evaluate(Vector([]), env) == GList([])
    assert isinstance(evaluate(Vector([]), env), GList)


def test_vector_preserves_source_order(env):
    expr = Vector([Literal(1), call("+", Literal(1), Literal(1)), Literal("three")])
    assert evaluate(expr, env) == GList([1, 2, "three"])


def test_vector_stops_at_first_failure(env):
    seen = []

    def record(args):
        seen.append(args)
        return args[0]

    local = env.define("record", Builtin("record", record))
    expr = Vector([
        call("record", Literal(1)),
        Reference("first_missing"),
        call("record", Literal(2)),
        Reference("second_missing"),
    ])
    with pytest.raises(errors.UndefinedReference) as info:
        evaluate(expr, local)
    assert info.value.name == "first_missing"
    assert seen == [[1]]


def test_application_spreads_list_argument(env):
    assert evaluate(call("+", Literal(20), Literal(22)), env) == 42
    # A list-valued literal argument is spread the same way a Vector is
    assert evaluate(Application(Reference("+"), Literal(GList([20, 22]))), env) == 42


def test_application_wraps_single_argument(env):
    assert evaluate(Application(Reference("id"), Literal("hello")), env) == "hello"


def test_list_argument_cannot_reach_a_function_whole(env):
    # id gets the two elements as two arguments, not the list
    with pytest.raises(errors.BuiltinError, match="id requires 1 argument"):
        evaluate(Application(Reference("id"), Literal(GList([1, 2]))), env)
    # wrapping it in a one-element vector passes the list itself
    wrapped = Application(Reference("id"), Vector([Literal(GList([1, 2]))]))
    assert evaluate(wrapped, env) == GList([1, 2])


def test_function_error_short_circuits_argument(env):
    with pytest.raises(errors.UndefinedReference) as info:
        evaluate(Application(Reference("missing_fn"), Reference("missing_arg")), env)
    assert info.value.name == "missing_fn"


def test_lambda_creates_closure_over_current_env(env):
    closure = evaluate(Lambda(("x",), Reference("x")), env)
    assert isinstance(closure, Closure)
    assert closure.params == ("x",)
    assert closure.env is env


def test_lexical_capture_ignores_caller_bindings(env):
    defining = env.define("x", 1)
    add_x = evaluate(lam(["y"], call("+", ref("x"), ref("y"))), defining)

    calling = defining.define("x", 100).define("add_x", add_x)
    assert evaluate(call("add_x", Literal(5)), calling) == 6


def test_closure_returning_closure(env):
    adder = lam(["a"], lam(["b"], call("+", ref("a"), ref("b"))))
    expr = call_value(call_value(adder, Literal(2)), Literal(3))
    assert evaluate(expr, env) == 5


def test_cond_evaluates_both_branches(env):
    expr = call("cond", Literal(True), Reference("undefined_branch"), Literal(0))
    with pytest.raises(errors.UndefinedReference) as info:
        evaluate(expr, env)
    assert info.value.name == "undefined_branch"


def test_cond_selects_after_evaluation(env):
    assert evaluate(call("cond", Literal(True), Literal("then"), Literal("else")), env) == "then"
    assert evaluate(call("cond", Literal(False), Literal("then"), Literal("else")), env) == "else"


def test_not_an_expression(env):
    with pytest.raises(errors.MalformedExpression):
        evaluate(42, env)


def call_value(fn_expr, *args):
    return Application(fn_expr, Vector(args))
