"""Standard definitions written as G-Expressions.

Everything here is built from the seven node kinds and the genesis axioms and
is loaded through the bootstrap loader, so order matters: a definition can
only refer to names defined above it.
"""

from __future__ import annotations

from gexpr.bootstrap import Definition, load_definitions
from gexpr.types.environment import Environment
from gexpr.types.expression import Application, call, lam, lit, match, ref, vec
from gexpr.types.pattern import ELSE


PRELUDE: tuple[Definition, ...] = (
    # --- Control flow (cond is eager: both branches are already values) ---
    ("when", lam(["condition", "body"],
                 call("cond", ref("condition"), ref("body"), lit(None)))),
    ("unless", lam(["condition", "body"],
                   call("cond", ref("condition"), lit(None), ref("body")))),
    # let([name, value], body): single binding, value taken from the pair
    ("let", lam(["binding", "body"],
                Application(lam(["x"], ref("body")),
                            vec(call("cdr", ref("binding")))))),

    # --- Single-element list helpers ---
    ("map", lam(["f", "x"], call("f", ref("x")))),
    ("filter", lam(["pred", "x"],
                   call("cond", call("pred", ref("x")), ref("x"), lit(None)))),
    ("reduce", lam(["f", "acc", "x"], call("f", ref("acc"), ref("x")))),

    # --- Arithmetic ---
    ("inc", lam(["x"], call("+", ref("x"), lit(1)))),
    ("dec", lam(["x"], call("-", ref("x"), lit(1)))),
    ("square", lam(["x"], call("*", ref("x"), ref("x")))),

    # --- Logic ---
    ("and", lam(["a", "b"], call("cond", ref("a"), ref("b"), lit(False)))),
    ("or", lam(["a", "b"], call("cond", ref("a"), lit(True), ref("b")))),
    ("not", lam(["x"], call("cond", ref("x"), lit(False), lit(True)))),

    # --- Comparison ---
    ("=", lam(["a", "b"], call("eq?", ref("a"), ref("b")))),
    ("!=", lam(["a", "b"], call("not", call("eq?", ref("a"), ref("b"))))),
    (">", lam(["a", "b"], call("not", call("<=", ref("a"), ref("b"))))),
    ("<", lam(["a", "b"], call("not", call("<=", ref("b"), ref("a"))))),
    (">=", lam(["a", "b"], call("<=", ref("b"), ref("a")))),

    # --- Higher-order ---
    ("compose", lam(["f", "g"],
                    lam(["x"], call("f", call("g", ref("x")))))),
    ("partial", lam(["f", "a"],
                    lam(["x"], call("f", ref("a"), ref("x"))))),
    ("curry", lam(["f"],
                  lam(["a"], lam(["b"], call("f", ref("a"), ref("b")))))),

    # try(expr, handler): errors are terminal, so the handler is never used
    ("try", lam(["expr", "handler"], ref("expr"))),
    ("case", lam(["expr", "branches"],
                 match(ref("expr"), (ELSE, ref("branches"))))),
)


def load_prelude(env: Environment) -> Environment:
    return load_definitions(PRELUDE, env)
