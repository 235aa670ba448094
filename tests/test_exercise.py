import subprocess
from unittest import mock

import pytest

from golings.exercise import Exercise, Result, State, build_args


def _write(tmp_path, content):
    path = tmp_path / "exercise1.go"
    path.write_text(content)
    return str(path)


def test_pending_when_marker_present(tmp_path):
    path = _write(
        tmp_path,
        """// exercise1.go
				// I AM NOT DONE
				package main

				func main() {

				}
				""",
    )
    ex = Exercise(path=path)
    assert ex.state() is State.PENDING
    assert str(ex.state()) == "Pending"


def test_done_when_marker_absent(tmp_path):
    path = _write(tmp_path, "")
    ex = Exercise(path=path)
    assert ex.state() is State.DONE
    assert str(ex.state()) == "Done"


def test_pending_when_file_missing(tmp_path):
    ex = Exercise(path=str(tmp_path / "missing.go"))
    assert ex.state() is State.PENDING


@pytest.mark.parametrize(
    "line",
    ["/// I AM NOT DONE", "//I   AM NOT\tDONE", "   // I AM NOT DONE yet"],
)
def test_marker_variants_are_pending(tmp_path, line):
    path = _write(tmp_path, f"package main\n{line}\n")
    assert Exercise(path=path).state() is State.PENDING


def test_marker_not_at_line_start_is_done(tmp_path):
    path = _write(tmp_path, "package main // I AM NOT DONE\n")
    assert Exercise(path=path).state() is State.DONE


def test_build_args_compile():
    ex = Exercise(name="a", path="exercises/a/main.go", mode="compile")
    assert build_args(ex) == ["run", "./exercises/a/main.go"]


def test_build_args_test_mode():
    ex = Exercise(name="b", path="exercises/b", mode="test")
    assert build_args(ex) == ["test", "-v", "./exercises/b"]


def test_run_captures_output():
    ex = Exercise(name="a", path="p", mode="compile")
    completed = subprocess.CompletedProcess(["go"], 0, stdout="hello", stderr="")
    with mock.patch("golings.exercise.subprocess.run", return_value=completed) as run:
        result = ex.run()
    assert run.call_args.args[0] == ["go", "run", "./p"]
    assert result == Result(exercise=ex, out="hello", err="", returncode=0)
    assert result.ok


def test_run_failure_reports_stderr():
    ex = Exercise(name="a", path="p", mode="test")
    completed = subprocess.CompletedProcess(["go"], 1, stdout="", stderr="boom")
    with mock.patch("golings.exercise.subprocess.run", return_value=completed):
        result = ex.run()
    assert result.err == "boom"
    assert result.returncode == 1
    assert not result.ok


def test_run_without_go_tool():
    ex = Exercise(name="a", path="p", mode="compile")
    with mock.patch(
        "golings.exercise.subprocess.run", side_effect=FileNotFoundError("no go")
    ):
        result = ex.run()
    assert result.returncode is None
    assert result.err == "no go"
    assert not result.ok