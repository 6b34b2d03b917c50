"""Core evaluator ("unfurl") for G-Expressions.

One rule per node kind. Evaluation is an ordinary recursive call tree: there
is no step or depth limit unless a StepBudget is passed, and deep recursion
surfaces as the host's RecursionError. Errors propagate fail-fast as
EvalError subclasses.
"""

from __future__ import annotations

from gexpr import Value
from gexpr.errors import MalformedExpression
from gexpr.evaluation.apply import apply, spread_arguments
from gexpr.evaluation.budget import StepBudget
from gexpr.evaluation.matcher import select_branch
from gexpr.types.closure import Closure, FixUnfolding
from gexpr.types.environment import Environment
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
from gexpr.types.values import GList


def evaluate(expr: Expression, env: Environment, budget: StepBudget | None = None) -> Value:
    """Unfurl `expr` in `env` and return its value."""
    if budget is not None:
        budget.tick()

    match expr:
        case Literal(value=value):
            return value

        case Reference(name=name):
            return env.lookup(name)

        case Vector(elements=elements):
            # Left to right; the first failure stops the remaining elements.
            return GList(evaluate(element, env, budget) for element in elements)

        case Application(fn=fn_expr, arg=arg_expr):
            fn = evaluate(fn_expr, env, budget)
            arg = evaluate(arg_expr, env, budget)
            return apply(fn, spread_arguments(arg), budget)

        case Lambda(params=params, body=body):
            return Closure(params, body, env)

        case Fix():
            return unfold_fix(expr, env, budget)

        case Match(scrutinee=scrutinee, branches=branches):
            value = evaluate(scrutinee, env, budget)
            # Branch bodies see the Match's own environment, no pattern bindings.
            return evaluate(select_branch(value, branches), env, budget)

    raise MalformedExpression(expr)


def unfold_fix(node: Fix, env: Environment, budget: StepBudget | None = None) -> Value:
    """Unfurl Fix(f) as Application(f, Fix(f)).

    The Fix(f) argument is handed to f as a FixUnfolding that, on every call,
    unfurls the same Fix node again in `env` and applies the result. Nothing
    is cached: each recursive call rebuilds the application and re-evaluates
    f, so termination depends on f guarding its recursion inside a Lambda.
    The unfolding keeps no budget; each call runs under the caller's.
    """
    fn = evaluate(node.fn, env, budget)
    return apply(fn, [FixUnfolding(node, env)], budget)
