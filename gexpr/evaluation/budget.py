from __future__ import annotations

from gexpr.errors import StepLimitExceeded


class StepBudget:
    """Opt-in bound on the number of evaluation steps for one evaluate call.

    Evaluation is unbounded by default; pass a StepBudget to evaluate/apply to
    stop a diverging program with StepLimitExceeded instead of running until
    the host stack is exhausted. A budget is owned by a single call tree.
    """

    __slots__ = ("max_steps", "steps")

    def __init__(self, max_steps: int):
        if max_steps <= 0:
            raise ValueError("max_steps must be positive")
        self.max_steps = max_steps
        self.steps = 0

    def tick(self) -> None:
        self.steps += 1
        if self.steps > self.max_steps:
            raise StepLimitExceeded(self.max_steps)

    @property
    def remaining(self) -> int:
        return max(self.max_steps - self.steps, 0)
