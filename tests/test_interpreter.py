import io

import pytest

from slang.__main__ import main
from slang.errors import SlangLoadError, SlangSyntaxError
from slang.interpreter import Interpreter
from slang.repl import Shell
from slang.types.nil import Nil


def test_eval_returns_last_result(interp):
    assert interp.eval("1 2 3") == 3.0
    assert interp.eval("") is Nil
    assert interp.eval("   \n") is Nil


def test_eval_syntax_error(interp):
    with pytest.raises(SlangSyntaxError):
        interp.eval("(δ x 1")


def test_load_file(interp, tmp_path):
    path = tmp_path / "prog.sl"
    path.write_text("(δ x 4\n  (ι x))\n", encoding="utf-8")
    assert interp.load(path) == 4.0


def test_load_searches_slang_path(interp, tmp_path, monkeypatch):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "answer.sl").write_text("(λ x x 42)", encoding="utf-8")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("SLANG_PATH", str(lib))
    assert interp.load("answer.sl") == 42.0


def test_load_missing_file(interp, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SLANG_PATH", raising=False)
    with pytest.raises(SlangLoadError, match="missing.sl"):
        interp.load("missing.sl")


# -----------------------------------------------------
# Shell
# -----------------------------------------------------

@pytest.fixture
def shell():
    return Shell(Interpreter(), stdout=io.StringIO())


def test_shell_prints_rendered_result(shell):
    assert not shell.onecmd('(δ x 1 (λ y x))')
    assert shell.stdout.getvalue() == "(λ y 1)\n"


def test_shell_reports_errors_and_continues(shell):
    assert not shell.onecmd("x")
    assert not shell.onecmd('(λ 5 "ok" 5)')
    output = shell.stdout.getvalue().splitlines()
    assert "error: " in output[0]
    assert "Variable 'x' is not defined" in output[0]
    assert output[1] == '"ok"'


def test_shell_empty_line(shell):
    assert not shell.onecmd("")
    assert shell.stdout.getvalue() == ""


def test_shell_exit(shell):
    assert shell.onecmd("exit")
    assert shell.onecmd("EOF")


def test_shell_load(shell, tmp_path):
    path = tmp_path / "prog.sl"
    path.write_text("(δ id2 (λ v v) (id2 7))", encoding="utf-8")
    assert not shell.onecmd(f"load {path}")
    assert shell.stdout.getvalue() == "7\n"


def test_shell_load_missing(shell, tmp_path):
    assert not shell.onecmd(f"load {tmp_path / 'nope.sl'}")
    assert "Cannot load" in shell.stdout.getvalue()


def test_shell_reports_runaway_recursion(shell):
    # ω ω never reaches a value
    assert not shell.onecmd("(δ w (λ f (f f)) (w w))")
    assert "maximum recursion depth exceeded" in shell.stdout.getvalue()


# -----------------------------------------------------
# CLI
# -----------------------------------------------------

def test_main_runs_file(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("sys.setrecursionlimit", lambda limit: None)
    path = tmp_path / "prog.sl"
    path.write_text('(δ greet "hi" greet)', encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == '"hi"\n'


def test_main_reports_errors(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("sys.setrecursionlimit", lambda limit: None)
    path = tmp_path / "bad.sl"
    path.write_text("(δ x 1)", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "3 arguments expected" in capsys.readouterr().err
