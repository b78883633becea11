import io
import subprocess
import sys

import pytest

from rustdrills.cli import main, rustc_exists, spawn_watch_shell


def _fake_run(compile_code=0, run_code=0, stdout=b""):
    def fake(args, *_, **__):
        if list(args[:2]) == ["rustc", "--version"]:
            return subprocess.CompletedProcess(args, 0)
        code = compile_code if args[0] in ("rustc", "cargo") else run_code
        return subprocess.CompletedProcess(args, code, stdout=stdout, stderr=b"")

    return fake


def _project(root, entries, directory=""):
    blocks = []
    if directory:
        (root / directory).mkdir(exist_ok=True)
    for name, mode, source, hint in entries:
        relative = f"{directory}/{name}.rs" if directory else f"{name}.rs"
        (root / relative).write_text(source, encoding="utf-8")
        blocks.append(
            "[[exercises]]\n"
            f'name = "{name}"\n'
            f'path = "{relative}"\n'
            f'mode = "{mode}"\n'
            f'hint = "{hint}"\n'
        )
    (root / "info.toml").write_text("\n".join(blocks), encoding="utf-8")
    (root / "default_out.txt").write_text("Thanks for installing!", encoding="utf-8")


SUCCESS = [
    ("compSuccess", "compile", "fn main() {\n}\n", ""),
    ("testSuccess", "test", "#[test]\nfn passing() {}\n", ""),
]
FAILURE = [
    ("compFailure", "compile", "fn main() {\n    let\n}\n", ""),
    ("testFailure", "test", "#[test]\nfn passing() {}\n", "Hello!"),
]
STATE = [
    ("pending_exercise", "compile", "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n", ""),
    ("pending_test_exercise", "test", "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n", ""),
]


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_runs_without_arguments(in_tmp, monkeypatch, capsys):
    _project(in_tmp, SUCCESS)
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "welcome to..." in out
    assert "Thanks for installing!" in out


def test_fails_when_in_wrong_dir(in_tmp):
    assert main([]) == 1


def test_fails_without_rustc(in_tmp, monkeypatch, capsys):
    _project(in_tmp, SUCCESS)

    def missing(*_, **__):
        raise FileNotFoundError("rustc")

    monkeypatch.setattr(subprocess, "run", missing)
    assert main(["v"]) == 1
    assert "We cannot find `rustc`." in capsys.readouterr().out


def test_verify_all_success(in_tmp, monkeypatch):
    _project(in_tmp, SUCCESS)
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main(["v"]) == 0


def test_verify_fails_if_some_fails(in_tmp, monkeypatch):
    _project(in_tmp, FAILURE)
    monkeypatch.setattr(subprocess, "run", _fake_run(compile_code=1))
    assert main(["v"]) == 1


def test_run_single_compile_success(in_tmp, monkeypatch):
    _project(in_tmp, SUCCESS)
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main(["r", "compSuccess"]) == 0


def test_run_single_compile_failure(in_tmp, monkeypatch):
    _project(in_tmp, FAILURE)
    monkeypatch.setattr(subprocess, "run", _fake_run(compile_code=1))
    assert main(["r", "compFailure"]) == 1


def test_run_single_test_success(in_tmp, monkeypatch):
    _project(in_tmp, SUCCESS)
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main(["r", "testSuccess"]) == 0


def test_run_single_test_failure(in_tmp, monkeypatch):
    _project(in_tmp, FAILURE)
    monkeypatch.setattr(subprocess, "run", _fake_run(run_code=101))
    assert main(["r", "testFailure"]) == 1


def test_run_single_test_not_passed(in_tmp, monkeypatch, capsys):
    _project(in_tmp, FAILURE)
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main(["r", "testNotPassed.rs"]) == 1
    assert "No exercise found for your given name!" in capsys.readouterr().out


def test_run_single_test_no_filename(in_tmp, monkeypatch):
    _project(in_tmp, SUCCESS)
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main(["r"]) == 1


def test_run_single_test_no_exercise(in_tmp, monkeypatch):
    _project(in_tmp, FAILURE)
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main(["r", "compNoExercise.rs"]) == 1


def test_get_hint_for_single_test(in_tmp, monkeypatch, capsys):
    _project(in_tmp, FAILURE)
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main(["h", "testFailure"]) == 0
    assert capsys.readouterr().out == "Hello!\n"


def test_run_compile_exercise_does_not_prompt(in_tmp, monkeypatch, capsys):
    _project(in_tmp, STATE)
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main(["r", "pending_exercise"]) == 0
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_test_exercise_does_not_prompt(in_tmp, monkeypatch, capsys):
    _project(in_tmp, STATE)
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main(["r", "pending_test_exercise"]) == 0
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_single_test_success_with_output(in_tmp, monkeypatch, capsys):
    _project(in_tmp, SUCCESS)
    monkeypatch.setattr(subprocess, "run", _fake_run(stdout=b"THIS TEST TOO SHALL PASS\n"))
    assert main(["--nocapture", "r", "testSuccess"]) == 0
    assert "THIS TEST TOO SHALL PAS" in capsys.readouterr().out


def test_run_single_test_success_without_output(in_tmp, monkeypatch, capsys):
    _project(in_tmp, SUCCESS)
    monkeypatch.setattr(subprocess, "run", _fake_run(stdout=b"THIS TEST TOO SHALL PASS\n"))
    assert main(["r", "testSuccess"]) == 0
    assert "THIS TEST TOO SHALL PAS" not in capsys.readouterr().out


def test_watch_reports_completion_when_all_pass(in_tmp, monkeypatch, capsys):
    _project(in_tmp, SUCCESS[:1], directory="exercises")
    monkeypatch.setattr(subprocess, "run", _fake_run())
    assert main(["w"]) == 0
    assert "All exercises completed!" in capsys.readouterr().out


def test_rustc_exists_reflects_exit_status(monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda args, **_: subprocess.CompletedProcess(args, 1))
    assert rustc_exists() is False
    monkeypatch.setattr(subprocess, "run", lambda args, **_: subprocess.CompletedProcess(args, 0))
    assert rustc_exists() is True


def test_spawn_watch_shell_answers_hint(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("hint\nfoo\n"))
    thread = spawn_watch_shell(lambda: "Try harder")
    thread.join(timeout=5)
    out = capsys.readouterr().out
    assert not thread.is_alive()
    assert "Type 'hint' to get help" in out
    assert "Try harder\n" in out
    assert "unknown command: foo\n" in out