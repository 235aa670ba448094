"""The golings commands: hint, list, run, verify and watch."""

from __future__ import annotations

import os
import subprocess
import sys
import threading
from collections.abc import Callable

from termcolor import cprint
from tqdm import tqdm
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from golings import ui
from golings.catalog import (
    ExerciseNotFoundError,
    find,
    list_exercises,
    next_pending,
)
from golings.exercise import Exercise, Result, State

_LOOKUP_ERRORS = (OSError, ValueError, LookupError)


class CommandError(Exception):
    """A command failed; its message has already been shown to the user."""


def _say(text: str, color: str) -> None:
    end = "" if text.endswith("\n") else "\n"
    cprint(text, color, end=end, flush=True)


def _lookup(info_file: str, name: str) -> Exercise:
    if name == "next":
        return next_pending(info_file)
    return find(name, info_file)


def _report_failure(result: Result, *, with_hint: bool) -> None:
    _say(f"Failed to compile the exercise {result.exercise.path}\n\n", "cyan")
    _say("Check the output below: \n\n", "white")
    _say(result.err, "red")
    _say(result.out, "red")
    if with_hint:
        _say(
            "If you feel stuck, ask a hint by executing "
            f"`golings hint {result.exercise.name}`",
            "yellow",
        )


def _failure_message(result: Result) -> str:
    if result.returncode is None:
        return result.err or "could not start the go tool"
    return f"exit status {result.returncode}"


class Spinner:
    """An indeterminate progress indicator shown while an exercise runs."""

    def __init__(self, description: str, interval: float = 0.25, steps: int = 100) -> None:
        self.description = description
        self.closed = False
        self._interval = interval
        self._steps = steps
        self._stop = threading.Event()
        self._bar = tqdm(total=None, desc=description, file=sys.stderr, leave=False)
        self._thread = threading.Thread(target=self._spin, daemon=True)
        self._thread.start()

    def _spin(self) -> None:
        for _ in range(self._steps):
            self._bar.update(1)
            if self._stop.wait(self._interval):
                return

    def close(self) -> None:
        """Stop spinning and announce completion; later calls do nothing."""
        if self.closed:
            return
        self.closed = True
        self._stop.set()
        self._thread.join()
        self._bar.close()
        _say("\nRunning complete!\n\n", "white")

    def __enter__(self) -> Spinner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def run_spinner(name: str) -> Spinner:
    """Start a spinner for the named exercise."""
    return Spinner(f"Running exercise: {name}")


def hint_command(info_file: str, name: str) -> Exercise:
    """Show the hint of the named exercise, or of the next pending one for 'next'."""
    try:
        exercise = _lookup(info_file, name)
    except _LOOKUP_ERRORS as exc:
        _say(str(exc), "red")
        raise CommandError(str(exc)) from exc
    _say(exercise.hint, "yellow")
    return exercise


def list_command(info_file: str) -> list[Exercise]:
    """Print a table of every exercise with its state."""
    try:
        exercises = list_exercises(info_file)
    except _LOOKUP_ERRORS as exc:
        _say(str(exc), "red")
        raise CommandError(str(exc)) from exc
    ui.print_list(sys.stdout, exercises)
    return exercises


def run_command(info_file: str, name: str) -> Result:
    """Run one exercise; fails if it does not build or is still pending."""
    try:
        exercise = _lookup(info_file, name)
    except ExerciseNotFoundError as exc:
        _say(f"No exercise found for '{name}'", "white")
        raise CommandError(str(exc)) from exc
    except _LOOKUP_ERRORS as exc:
        _say(str(exc), "red")
        raise CommandError(str(exc)) from exc

    with run_spinner(exercise.name):
        result = exercise.run()

    if not result.ok:
        _report_failure(result, with_hint=True)
        raise CommandError(_failure_message(result))

    _say(f"✅ Successfully tested {result.exercise.path}!\n\n", "green")
    _say("Congratulations!\n\n", "green")
    _say("Here is the output of your program:\n\n", "green")
    _say(result.out, "cyan")
    if result.exercise.state() is State.PENDING:
        _say("Remove the 'I AM NOT DONE' from the file to keep going\n", "white")
        raise CommandError("exercise is still pending")
    return result


def verify_command(info_file: str) -> list[Result]:
    """Run every exercise in order, stopping at the first one that reports errors."""
    try:
        exercises = list_exercises(info_file)
    except _LOOKUP_ERRORS as exc:
        _say(str(exc), "red")
        raise CommandError(str(exc)) from exc

    results: list[Result] = []
    with tqdm(
        total=len(exercises),
        desc="Running exercises",
        file=sys.stderr,
        ascii=" >=",
        ncols=80,
    ) as bar:
        for exercise in exercises:
            bar.set_description(f"Running {exercise.name}")
            result = exercise.run()
            bar.update(1)
            results.append(result)
            if result.err:
                bar.close()
                print("\n")
                _report_failure(result, with_hint=False)
                raise CommandError(f"exercise {exercise.name} failed")

    _say("Congratulations!!!", "green")
    _say("You passed all the exercises", "green")
    return results


def clear_screen() -> None:
    """Clear the terminal."""
    command = ["cmd", "/c", "cls"] if sys.platform == "win32" else ["clear"]
    try:
        subprocess.run(command, check=True)
    except (OSError, subprocess.CalledProcessError):
        _say("Clear terminal command error", "red")


def print_hint(info_file: str) -> None:
    """Clear the screen and show the hint of the next pending exercise."""
    clear_screen()
    try:
        exercise = next_pending(info_file)
    except _LOOKUP_ERRORS:
        _say("Failed to find next exercises", "red")
        return
    _say(exercise.hint, "yellow")


def print_list(info_file: str) -> None:
    """Clear the screen and show the table of exercises."""
    clear_screen()
    try:
        exercises = list_exercises(info_file)
    except _LOOKUP_ERRORS:
        _say("Failed to list exercises", "red")
        return
    ui.print_list(sys.stdout, exercises)


def run_next_exercise(info_file: str) -> Result | None:
    """Clear the screen and run the next pending exercise, reporting the outcome."""
    clear_screen()
    try:
        exercise = next_pending(info_file)
    except _LOOKUP_ERRORS:
        _say("Failed to find next exercises", "red")
        return None

    result = exercise.run()
    if not result.ok:
        _report_failure(result, with_hint=True)
        return result

    _say("Congratulations!\n\n", "green")
    _say("Here is the output of your program:\n\n", "green")
    _say(result.out, "cyan")
    if result.exercise.state() is State.PENDING:
        _say("Remove the 'I AM NOT DONE' from the file to keep going\n", "white")
        _say("exercise is still pending", "red")
    return result


class _WriteHandler(FileSystemEventHandler):
    def __init__(self, on_change: Callable[[str], object]) -> None:
        super().__init__()
        self._on_change = on_change

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._on_change(os.fsdecode(event.src_path))


def watch_events(on_change: Callable[[str], object], root: str):
    """Watch every directory below root and call on_change with each written file.

    Returns the started observer; stop and join it when done.
    """
    if not os.path.isdir(root):
        raise FileNotFoundError(f"no such directory: {root}")
    observer = Observer()
    observer.schedule(_WriteHandler(on_change), root, recursive=True)
    observer.start()
    return observer


def watch_command(info_file: str) -> None:
    """Re-run the next pending exercise whenever an exercise file is written."""
    lock = threading.Lock()

    def rerun(_path: str | None = None) -> None:
        with lock:
            run_next_exercise(info_file)

    rerun()
    root = os.path.join(os.getcwd(), "exercises")
    try:
        observer = watch_events(rerun, root)
    except OSError as exc:
        _say(str(exc), "red")
        raise CommandError(str(exc)) from exc

    try:
        for line in sys.stdin:
            command = line.rstrip("\n")
            with lock:
                match command:
                    case "list":
                        print_list(info_file)
                    case "hint":
                        print_hint(info_file)
                    case "quit" | "exit":
                        _say("Bye by golings o/", "green")
                        return
                    case _:
                        _say("only list or hint commands are available", "yellow")
    finally:
        observer.stop()
        observer.join()