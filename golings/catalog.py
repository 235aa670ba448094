"""Reading the list of exercises from the info file."""

from __future__ import annotations

import tomllib
from typing import Any

from golings.exercise import Exercise, State

_FIELDS = ("name", "path", "mode", "hint")


class ExerciseNotFoundError(LookupError):
    """No exercise with the requested name exists."""

    def __init__(self, message: str = "exercise not found") -> None:
        super().__init__(message)


class NoPendingExercisesError(LookupError):
    """Every exercise is already done."""

    def __init__(self, message: str = "no pending exercises") -> None:
        super().__init__(message)


def _exercise_from_table(table: Any) -> Exercise:
    if not isinstance(table, dict):
        raise ValueError(f"exercise entry must be a table, got {table!r}")
    values: dict[str, str] = {}
    for key, value in table.items():
        field = key.lower()
        if field not in _FIELDS:
            continue
        if not isinstance(value, str):
            raise ValueError(f"exercise field {key!r} must be a string")
        values[field] = value
    return Exercise(**values)


def list_exercises(info_file: str) -> list[Exercise]:
    """All exercises in the info file, in file order."""
    with open(info_file, "rb") as handle:
        data = tomllib.load(handle)
    entries = next(
        (value for key, value in data.items() if key.lower() == "exercises"), []
    )
    if not isinstance(entries, list):
        raise ValueError("'exercises' must be an array of tables")
    return [_exercise_from_table(entry) for entry in entries]


def next_pending(info_file: str) -> Exercise:
    """The first exercise that is still pending."""
    for exercise in list_exercises(info_file):
        if exercise.state() is State.PENDING:
            return exercise
    raise NoPendingExercisesError()


def find(name: str, info_file: str) -> Exercise:
    """The exercise with the given name."""
    for exercise in list_exercises(info_file):
        if exercise.name == name:
            return exercise
    raise ExerciseNotFoundError()