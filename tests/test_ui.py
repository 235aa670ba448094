import io

from golings.exercise import Exercise
from golings.ui import print_list


def _render(exercises):
    out = io.StringIO()
    print_list(out, exercises)
    return out.getvalue()


def test_rows_contain_exercise_data(tmp_path):
    done = tmp_path / "done.go"
    done.write_text("package main\n")
    pending = tmp_path / "pending.go"
    pending.write_text("// I AM NOT DONE\npackage main\n")
    text = _render(
        [
            Exercise(name="done1", path=str(done)),
            Exercise(name="pending1", path=str(pending)),
        ]
    )
    lines = text.splitlines()
    done_line = next(line for line in lines if "done1" in line)
    pending_line = next(line for line in lines if "pending1" in line)
    assert str(done) in done_line and "Done" in done_line
    assert "Pending" in pending_line


def test_header_present():
    text = _render([])
    assert "NAME" in text
    assert "PATH" in text
    assert "STATE" in text


def test_one_line_per_exercise(tmp_path):
    exercises = [Exercise(name=f"ex{i}", path=str(tmp_path / f"{i}.go")) for i in range(3)]
    lines = _render(exercises).splitlines()
    # borders above and below the header, and a closing border
    assert len(lines) == len(exercises) + 4
    widths = {len(line) for line in lines}
    assert len(widths) == 1


def test_numeric_names_kept_verbatim(tmp_path):
    text = _render([Exercise(name="007", path=str(tmp_path / "x.go"))])
    assert "007" in text
    assert text.endswith("\n")