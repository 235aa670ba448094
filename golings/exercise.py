"""Exercises, their completion state and how they are run."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from enum import Enum

_NOT_DONE = re.compile(rb"(?m)^\s*///?\s*I\s+AM\s+NOT\s+DONE")


class State(Enum):
    """Whether an exercise still carries its 'not done' marker."""

    PENDING = 1
    DONE = 2

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Exercise:
    """One exercise as described in the info file."""

    name: str = ""
    path: str = ""
    mode: str = ""
    hint: str = ""

    def state(self) -> State:
        """Pending while the file is unreadable or still marked as not done."""
        try:
            data = self.path and open(self.path, "rb").read()
        except OSError:
            return State.PENDING
        if not self.path:
            return State.PENDING
        return State.PENDING if _NOT_DONE.search(data) else State.DONE

    def run(self) -> Result:
        """Compile or test the exercise with the go tool and capture its output."""
        try:
            completed = subprocess.run(
                ["go", *build_args(self)],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            return Result(exercise=self, out="", err=str(exc), returncode=None)
        return Result(
            exercise=self,
            out=completed.stdout,
            err=completed.stderr,
            returncode=completed.returncode,
        )


@dataclass(frozen=True)
class Result:
    """Output of one exercise run."""

    exercise: Exercise
    out: str = ""
    err: str = ""
    returncode: int | None = 0

    @property
    def ok(self) -> bool:
        """True when the go tool ran and exited successfully."""
        return self.returncode == 0


def build_args(exercise: Exercise) -> list[str]:
    """Arguments for the go tool: 'run' for compile exercises, 'test -v' otherwise."""
    args = ["run"] if exercise.mode == "compile" else ["test", "-v"]
    args.append(f"./{exercise.path}")
    return args