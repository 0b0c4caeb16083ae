"""String and text-file exercises."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

WORD_SEPARATORS = frozenset(" \t\n\0")
NAME_LABEL = "Name:"


def count_length(word: str) -> int:
    """Count the characters of ``word`` one by one."""
    length = 0
    for _ in word:
        length += 1
    return length


def join_sentences(*args: str) -> str:
    """Join sentences into one, separated by single spaces."""
    return " ".join(args)


def same_sequence(first: str, second: str) -> bool:
    """Return True when two sequences are identical."""
    return first == second


def find_occurrences(text: str, word: str) -> list[int]:
    """Return every index at which ``word`` starts in ``text``, overlaps included."""
    if not word:
        raise ValueError("word to search for must not be empty")
    return [
        index
        for index in range(len(text) - len(word) + 1)
        if text.startswith(word, index)
    ]


def replace_gene(genotype: str, old: str, new: str) -> str:
    """Return ``genotype`` with every ``old`` gene replaced by ``new``."""
    if not old:
        raise ValueError("gene to replace must not be empty")
    return genotype.replace(old, new)


class TextCounts(NamedTuple):
    """Character and word counts of a text."""

    characters: int
    words: int


def count_text(text: str) -> TextCounts:
    """Count characters and words the way the exercise does.

    Every character counts; every separator (space, tab, newline, NUL)
    ends a word, and a non-empty text has one more word at its end.
    """
    characters = len(text)
    words = sum(1 for ch in text if ch in WORD_SEPARATORS)
    if characters > 0:
        words += 1
    return TextCounts(characters, words)


def write_names(path: str | os.PathLike, names: Iterable[str]) -> None:
    """Write each name to ``path`` as a labelled entry."""
    entries = list(names)
    for name in entries:
        if not name or any(ch.isspace() for ch in name):
            raise ValueError(f"name must be one non-empty word: {name!r}")
    with open(path, "w", encoding="utf-8") as handle:
        for name in entries:
            handle.write(f"\n{NAME_LABEL} {name} \n")


def read_names(path: str | os.PathLike) -> list[str]:
    """Read the names stored in ``path`` word by word, skipping the labels."""
    text = Path(path).read_text(encoding="utf-8")
    return [token for token in text.split() if token != NAME_LABEL]