import pytest

from gexpr.builtin.genesis import genesis_environment
from gexpr.bootstrap import bootstrap, bootstrap_with_prelude
from gexpr.types.expression import Fix, Literal, Match, call, lam, ref
from gexpr.types.pattern import ELSE, LiteralPattern


# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def env():
    return genesis_environment()


@pytest.fixture
def boot_env():
    return bootstrap()


@pytest.fixture
def prelude_env():
    return bootstrap_with_prelude()


@pytest.fixture
def factorial():
    # fix(λf. λn. match (<= n 1) { #t => 1 | else => n * f(n - 1) })
    body = Match(
        call("<=", ref("n"), Literal(1)),
        (
            (LiteralPattern(True), Literal(1)),
            (ELSE, call("*", ref("n"), call("f", call("-", ref("n"), Literal(1))))),
        ),
    )
    return Fix(lam(["f"], lam(["n"], body)))


@pytest.fixture
def fibonacci():
    # fix(λf. λn. match (<= n 1) { #t => n | else => f(n - 1) + f(n - 2) })
    body = Match(
        call("<=", ref("n"), Literal(1)),
        (
            (LiteralPattern(True), ref("n")),
            (ELSE, call("+",
                        call("f", call("-", ref("n"), Literal(1))),
                        call("f", call("-", ref("n"), Literal(2))))),
        ),
    )
    return Fix(lam(["f"], lam(["n"], body)))
