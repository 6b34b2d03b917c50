"""Bootstrap loader: grows an environment from ordered definitions.

Each definition is unfurled against the environment accumulated so far and
bound under its name, so later definitions (and the closures they create)
can see earlier ones.
"""

from __future__ import annotations

import logging
from typing import Iterable

from gexpr.errors import DefinitionError, EvalError
from gexpr.evaluation.evaluator import evaluate
from gexpr.builtin.genesis import genesis_environment
from gexpr.types.environment import Environment
from gexpr.types.expression import Expression, Literal, call
from gexpr.types.symbol import Symbol

logger = logging.getLogger(__name__)

Definition = tuple[str, Expression]


def load_definitions(definitions: Iterable[Definition], base_env: Environment) -> Environment:
    """Evaluate `definitions` in order on top of `base_env`.

    Returns the extended environment. The first failing definition aborts the
    load with DefinitionError naming it; `base_env` itself is never modified.
    """
    env = base_env
    for name, expr in definitions:
        try:
            value = evaluate(expr, env)
        except EvalError as e:
            logger.error("Failed to define %s: %s", name, e)
            raise DefinitionError(name, e) from e
        logger.debug("Defined %s", name)
        env = env.define(name, value)
    return env


# Marker definitions of the genesis context, built from cons and symbols.
GENESIS_DEFINITIONS: tuple[Definition, ...] = (
    ("lambda", call("cons",
                    Literal(Symbol("closure")),
                    call("cons", Literal("params"), Literal("body")))),
    ("if", call("cons",
                Literal(Symbol("if")),
                call("cons",
                     Literal("condition"),
                     call("cons", Literal("then"), Literal("else"))))),
    ("list", Literal(Symbol("list-constructor"))),
    ("eval", Literal(Symbol("evaluator"))),
)


def bootstrap() -> Environment:
    """Axioms plus the genesis definitions."""
    return load_definitions(GENESIS_DEFINITIONS, genesis_environment())


def bootstrap_with_prelude() -> Environment:
    """Bootstrapped environment with the prelude loaded on top."""
    from gexpr.prelude import load_prelude
    return load_prelude(bootstrap())
