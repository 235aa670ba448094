"""Command-line entry point for golings."""

from __future__ import annotations

import argparse
import platform
import sys
from collections.abc import Sequence

from golings import commands

VERSION = "dev"
COMMIT = "none"
DATE = "unknown"
INFO_FILE = "info.toml"

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
}


def _goos() -> str:
    return platform.system().lower() or sys.platform


def _goarch() -> str:
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine)


def build_version(version: str, commit: str, date: str) -> str:
    """The text shown by --version."""
    result = version
    if commit:
        result = f"{result}\ncommit: {commit}"
    if date:
        result = f"{result}\nbuilt at: {date}"
    return f"{result}\ngoos: {_goos()}\ngoarch: {_goarch()}"


def build_parser(version: str) -> argparse.ArgumentParser:
    """The argument parser with every golings subcommand."""
    parser = argparse.ArgumentParser(
        prog="golings", description="Learn go through interactive exercises"
    )
    parser.add_argument("--version", "-v", action="version", version=version)
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    hint = sub.add_parser("hint", help="Get a hint for an exercise")
    hint.add_argument("name", metavar="<exercise name>")
    hint.set_defaults(handler=lambda args: commands.hint_command(INFO_FILE, args.name))

    listing = sub.add_parser("list", help="List all exercises")
    listing.set_defaults(handler=lambda args: commands.list_command(INFO_FILE))

    run = sub.add_parser(
        "run",
        help="Run a single exercise",
        description=(
            "example next pending exercise : golings run next\n"
            "example specific exercise : golings run variables1"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    run.add_argument("name", metavar="next | <exercise name>")
    run.set_defaults(handler=lambda args: commands.run_command(INFO_FILE, args.name))

    verify = sub.add_parser("verify", help="Verify all exercises")
    verify.set_defaults(handler=lambda args: commands.verify_command(INFO_FILE))

    watch = sub.add_parser("watch", help="Verify exercises when files are edited")
    watch.set_defaults(handler=lambda args: commands.watch_command(INFO_FILE))

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run golings with the given arguments and return the exit status."""
    parser = build_parser(build_version(VERSION, COMMIT, DATE))
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    try:
        handler(args)
    except commands.CommandError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())