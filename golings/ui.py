"""Rendering exercises for the terminal."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from tabulate import tabulate

from golings.exercise import Exercise

_HEADERS = ("NAME", "PATH", "STATE")


def print_list(out: TextIO, exercises: Iterable[Exercise]) -> None:
    """Write a table of exercises with their name, path and state."""
    rows = [(ex.name, ex.path, str(ex.state())) for ex in exercises]
    table = tabulate(
        rows,
        headers=_HEADERS,
        tablefmt="pretty",
        stralign="left",
        disable_numparse=True,
    )
    out.write(table + "\n")