from __future__ import annotations

from typing import Optional

from gexpr import Value
from gexpr.bootstrap import bootstrap
from gexpr.evaluation.apply import apply
from gexpr.evaluation.budget import StepBudget
from gexpr.evaluation.evaluator import evaluate
from gexpr.reader.codec import loads
from gexpr.types.environment import Environment
from gexpr.types.expression import Expression


class Interpreter:
    """
    Keeps an environment across calls and evaluates G-Expressions in it.
    The environment starts as the bootstrapped genesis context, optionally
    with the prelude loaded, and grows only through define().
    """

    def __init__(
        self,
        prelude: bool = True,
        *,
        max_steps: Optional[int] = None,
        env: Optional[Environment] = None,
    ):
        if env is None:
            env = bootstrap()
            if prelude:
                from gexpr.prelude import load_prelude
                env = load_prelude(env)
        self.env: Environment = env
        self.max_steps = max_steps

    def _budget(self) -> StepBudget | None:
        # A fresh budget per top-level call
        return StepBudget(self.max_steps) if self.max_steps is not None else None

    def eval(self, expr: Expression) -> Value:
        return evaluate(expr, self.env, self._budget())

    def eval_json(self, text: str) -> Value:
        return self.eval(loads(text))

    def define(self, name: str, expr: Expression) -> Value:
        """Evaluate `expr` and bind it under `name` for later calls."""
        value = self.eval(expr)
        self.env = self.env.define(name, value)
        return value

    def call(self, fn: str | Value, *args: Value) -> Value:
        """Apply a bound name (or a callable value) to already-evaluated arguments."""
        if isinstance(fn, str):
            fn = self.env.lookup(fn)
        return apply(fn, list(args), self._budget())
