"""Command-line helper for Go exercises: list, run, verify, watch and give hints."""

__version__ = "0.1.0"