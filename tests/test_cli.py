import io
import json

import pytest

from gexpr.cli import main
from gexpr.reader.codec import dumps
from gexpr.types.expression import Application, Literal, Reference, Vector, call


@pytest.fixture
def program(tmp_path):
    def write(expr):
        path = tmp_path / "program.json"
        path.write_text(dumps(expr), encoding="utf-8")
        return str(path)
    return write


def test_run_prints_value(program, capsys):
    assert main(["run", program(call("+", Literal(20), Literal(22)))]) == 0
    assert capsys.readouterr().out.strip() == "42"


def test_run_with_prelude_and_json_output(program, capsys):
    expr = call("cons", call("inc", Literal(1)), Literal("two"))
    assert main(["run", "--json", program(expr)]) == 0
    assert json.loads(capsys.readouterr().out) == {"list": [2, "two"]}


def test_run_factorial(program, factorial, capsys):
    assert main(["run", program(Application(factorial, Vector([Literal(5)])))]) == 0
    assert capsys.readouterr().out.strip() == "120"


def test_run_without_prelude_reports_error(program, capsys):
    assert main(["run", "--no-prelude", program(call("inc", Literal(1)))]) == 1
    assert "Undefined reference: inc" in capsys.readouterr().err


def test_run_step_limit(program, factorial, capsys):
    path = program(Application(factorial, Vector([Literal(5)])))
    assert main(["run", "--max-steps", "10", path]) == 1
    assert "Step limit exceeded" in capsys.readouterr().err


def test_run_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(dumps(Reference("eval"))))
    assert main(["run", "-"]) == 0
    assert capsys.readouterr().out.strip() == "'evaluator"


def test_invalid_json(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    assert main(["run", str(path)]) == 1
    assert "JSON parse error" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["run", str(tmp_path / "nope.json")]) == 1
    assert "error:" in capsys.readouterr().err


def test_show(program, capsys):
    assert main(["show", "--no-color", program(call("id", Literal(1)))]) == 0
    assert capsys.readouterr().out.splitlines() == ["app", "  ref id", "  vec[1]", "    lit 1"]


def test_env_lists_names(capsys):
    assert main(["env", "--no-prelude"]) == 0
    out = capsys.readouterr().out
    assert "cons" in out and "<builtin cons>" in out
    assert "square" not in out


def test_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["bogus"])
    assert info.value.code == 2


def test_recursion_limit_from_environment(monkeypatch, program, capsys):
    monkeypatch.setenv("GEXPR_RECURSION_LIMIT", "not-a-number")
    assert main(["run", program(Literal(1))]) == 2
    assert "GEXPR_RECURSION_LIMIT" in capsys.readouterr().err
