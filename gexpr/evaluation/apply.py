"""Application engine for G-Expressions.

Dispatches a callable value against an already-evaluated positional argument
list. Exposed on its own so callers holding a Closure or Builtin (for example
"call the generated function with a test input") do not need to wrap it in an
Application node.
"""

from __future__ import annotations

from typing import Sequence

from gexpr import Value
from gexpr.errors import ArityMismatch, NotCallable
from gexpr.evaluation.budget import StepBudget
from gexpr.types.closure import Builtin, Closure, FixUnfolding
from gexpr.types.values import GList


def spread_arguments(arg: Value) -> list[Value]:
    """A list argument becomes the positional arguments; anything else is wrapped."""
    if isinstance(arg, GList):
        return list(arg)
    return [arg]


def apply_closure(fn: Closure, args: Sequence[Value], budget: StepBudget | None = None) -> Value:
    """Bind `args` over the captured environment and unfurl the body.

    Exact arity is required; the bindings overlay the captured environment
    for this call only.
    """
    if len(args) != fn.arity:
        raise ArityMismatch(fn.arity, len(args))
    from gexpr.evaluation.evaluator import evaluate
    call_env = fn.env.extend(zip(fn.params, args))
    return evaluate(fn.body, call_env, budget)


def apply_unfolding(fn: FixUnfolding, args: Sequence[Value], budget: StepBudget | None = None) -> Value:
    """Unfurl the held Fix node again and apply the result to `args`."""
    from gexpr.evaluation.evaluator import evaluate
    return apply(evaluate(fn.node, fn.env, budget), args, budget)


def apply(head: Closure | Builtin | object, args: Sequence[Value], budget: StepBudget | None = None) -> Value:
    """Apply either a Closure or a Builtin.

    - For Closure, defer to apply_closure.
    - For a FixUnfolding, defer to apply_unfolding so the recursion runs under
      this call's budget.
    - For Builtin, call the native function with the argument list; it does its
      own arity and type checks and its errors propagate unchanged.
    - Otherwise, raise NotCallable.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, budget)
    elif isinstance(head, FixUnfolding):
        return apply_unfolding(head, args, budget)
    elif isinstance(head, Builtin):
        return head.fn(list(args))
    else:
        raise NotCallable(head)
