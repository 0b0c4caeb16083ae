"""Array exercises: aggregates, insertion, sorting, merging and series."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

DEFAULT_CUTOFF = 90
WELL_DONE = "WELL DONE!"
WORK_HARD = "Good,need to work hard!"

EVEN_PLACE_BONUS = 4
ODD_PLACE_BONUS = 3


def aggregate(marks: Iterable[int]) -> int:
    """Return the total of all marks."""
    return sum(marks)


def insert_at(values: Sequence[Any], position: int, value: Any) -> list:
    """Return a copy of ``values`` with ``value`` placed at 1-based ``position``.

    Elements from that position onwards move one place to the right.
    """
    if not 1 <= position <= len(values) + 1:
        raise ValueError(
            f"position must be between 1 and {len(values) + 1}: {position}"
        )
    result = list(values)
    result.insert(position - 1, value)
    return result


def selection_sort(values: Iterable[Any]) -> list:
    """Return the values in ascending order, sorted by repeated minimum selection."""
    result = list(values)
    for start in range(len(result)):
        smallest = min(range(start, len(result)), key=result.__getitem__)
        result[start], result[smallest] = result[smallest], result[start]
    return result


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list:
    """Merge two ascending sequences into one ascending list."""
    left: Iterator[Any] = iter(first)
    right: Iterator[Any] = iter(second)
    merged: list = []
    sentinel = object()
    a = next(left, sentinel)
    b = next(right, sentinel)
    while a is not sentinel and b is not sentinel:
        if b < a:
            merged.append(b)
            b = next(right, sentinel)
        else:
            merged.append(a)
            a = next(left, sentinel)
    if a is not sentinel:
        merged.append(a)
        merged.extend(left)
    if b is not sentinel:
        merged.append(b)
        merged.extend(right)
    return merged


def has_mark_at_least(marks: Iterable[int], cutoff: int = DEFAULT_CUTOFF) -> bool:
    """Return True as soon as one mark reaches ``cutoff``."""
    return any(mark >= cutoff for mark in marks)


def remark(marks: Iterable[int], cutoff: int = DEFAULT_CUTOFF) -> str:
    """Return the teacher's remark for a set of marks."""
    return WELL_DONE if has_mark_at_least(marks, cutoff) else WORK_HARD


def special_series(count: int) -> list[int]:
    """Return the first ``count`` numbers of the series 0, 1, 1, 2, 3, 5, ..."""
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    series: list[int] = []
    current, following = 0, 1
    for _ in range(count):
        series.append(current)
        current, following = following, current + following
    return series


def bump_marks(marks: Sequence[int]) -> list[int]:
    """Return the marks raised by the reviewer's pattern.

    Every mark except the last is raised: those at even offsets by 4, those
    at odd offsets by 3. The last mark stays as it is.
    """
    if not marks:
        return []
    bumped = [
        mark + (EVEN_PLACE_BONUS if offset % 2 == 0 else ODD_PLACE_BONUS)
        for offset, mark in enumerate(marks[:-1])
    ]
    bumped.append(marks[-1])
    return bumped