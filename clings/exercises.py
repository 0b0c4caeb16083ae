"""Locating exercises, their completion markers and their hints."""

from __future__ import annotations

import os
from pathlib import Path

PROBLEMS_DIR = "Problems"
HINT_FILE = "hint.txt"
NOT_DONE_MARKER = "//I AM NOT DONE"

PathLike = str | os.PathLike


def problems_root(cwd: PathLike) -> Path:
    """Return the directory holding the exercise folders below ``cwd``."""
    return Path(cwd) / PROBLEMS_DIR


def list_entries(path: PathLike) -> list[Path]:
    """Return the entries of a directory, sorted by name.

    Raises FileNotFoundError or NotADirectoryError when ``path`` cannot be listed.
    """
    return sorted(Path(path).iterdir(), key=lambda entry: entry.name)


def is_complete(path: PathLike) -> bool:
    """Return False while the exercise still carries the not-done marker."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return not any(NOT_DONE_MARKER in line for line in handle)


def hint_file(directory: PathLike) -> Path:
    """Return the hint file of an exercise directory."""
    directory = Path(directory)
    if directory.name == HINT_FILE:
        return directory
    return directory / HINT_FILE


def read_hint(path: PathLike, index: int) -> str | None:
    """Return line ``index`` of a hint file, or None when there is no such line."""
    if index < 0:
        raise ValueError(f"hint index must not be negative: {index}")
    with open(path, encoding="utf-8", errors="replace") as handle:
        for number, line in enumerate(handle):
            if number == index:
                return line.rstrip("\n")
    return None