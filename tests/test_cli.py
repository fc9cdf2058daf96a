import os
import subprocess
import sys

import pytest

import cli
from errors import InternalError, LexError, ParseError

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
CLI = os.path.join(ROOT, "cli.py")


def run_cli(args, cwd):
    return subprocess.run(
        [sys.executable, CLI, *args],
        text=True,
        capture_output=True,
        cwd=cwd,
        timeout=10,
    )


def test_translate_prints_runtime_definition_and_test(tmp_path):
    (tmp_path / "test.lang").write_text("def f(x, y)\n  add(x, y)\n", encoding="utf-8")
    proc = run_cli([], cwd=tmp_path)
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.splitlines() == [
        "function add(x,y) { return x+y };",
        "function f(x, y) {return add(x, y)};",
        "console.log(f(1,2));",
    ]


def test_lex_error_exits_nonzero_without_output(tmp_path):
    (tmp_path / "test.lang").write_text("def f(x) %", encoding="utf-8")
    proc = run_cli([], cwd=tmp_path)
    assert proc.returncode == 1
    assert proc.stdout.startswith("Lex error:")
    assert "function" not in proc.stdout


def test_missing_input_file(tmp_path):
    proc = run_cli([], cwd=tmp_path)
    assert proc.returncode == 1
    assert "File not found: test.lang" in proc.stdout


def test_translate_function():
    assert cli.translate("def g() 5") == "function g() {return 5};"


def test_translate_propagates_errors():
    with pytest.raises(LexError):
        cli.translate("def g() $")
    with pytest.raises(ParseError):
        cli.translate("def g(")


def test_build_command(tmp_path, capsys):
    src = tmp_path / "k.lang"
    src.write_text("def k(x) add(add(x, 1), 2)", encoding="utf-8")
    assert cli.main(["build", str(src)]) == 0
    assert capsys.readouterr().out == "function k(x) {return add(add(x, 1), 2)};\n"


def test_tokens_command(tmp_path, capsys):
    src = tmp_path / "t.lang"
    src.write_text("def g() 5", encoding="utf-8")
    assert cli.main(["tokens", str(src)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "DEF(def)",
        "IDENT(g)",
        "LPAREN(()",
        "RPAREN())",
        "INTEGER(5)",
    ]


def test_parse_command_dumps_tree(tmp_path, capsys):
    src = tmp_path / "p.lang"
    src.write_text("def h(x) g(x)", encoding="utf-8")
    assert cli.main(["parse", str(src)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "type: Definition",
        "name: h",
        "params:",
        "  - x",
        "body:",
        "  type: Call",
        "  name: g",
        "  args:",
        "    -",
        "      type: VariableReference",
        "      name: x",
    ]


def test_strict_rejects_trailing_tokens(tmp_path, capsys):
    src = tmp_path / "s.lang"
    src.write_text("def g() 5 6", encoding="utf-8")
    assert cli.main(["build", str(src)]) == 0
    assert capsys.readouterr().out == "function g() {return 5};\n"

    assert cli.main(["build", str(src), "--strict"]) == 1
    assert capsys.readouterr().out.startswith("Parse error: Unexpected trailing token")


def test_unknown_command_prints_usage(capsys):
    assert cli.main(["run", "x.lang"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_parse_error_on_default_path_prints_no_harness(tmp_path):
    (tmp_path / "test.lang").write_text("def f(x, y add(x, y)", encoding="utf-8")
    proc = run_cli([], cwd=tmp_path)
    assert proc.returncode == 1
    assert proc.stdout.startswith("Parse error: Expected RPAREN, got IDENT")
    assert cli.RUNTIME not in proc.stdout
    assert cli.TEST not in proc.stdout


def test_deep_nesting_reports_parse_error(tmp_path):
    src = tmp_path / "deep.lang"
    src.write_text("def f() " + "g(" * 400 + "1" + ")" * 400, encoding="utf-8")
    proc = run_cli(["build", str(src)], cwd=tmp_path)
    assert proc.returncode == 1
    assert proc.stdout.startswith("Parse error: Expression nested too deeply")
    assert "function" not in proc.stdout
    assert "Traceback" not in proc.stderr


def test_error_labels():
    assert LexError("x").label == "Lex error"
    assert ParseError("x").label == "Parse error"
    assert InternalError("x").label == "Internal error"


def test_packaged_modules_and_script():
    tomllib = pytest.importorskip("tomllib")
    with open(os.path.join(ROOT, "pyproject.toml"), "rb") as f:
        meta = tomllib.load(f)
    assert meta["project"]["scripts"] == {"deflang": "cli:main"}
    for name in meta["tool"]["setuptools"]["py-modules"]:
        assert os.path.exists(os.path.join(ROOT, f"{name}.py"))
