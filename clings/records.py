"""Record, enumeration and value exercises: captains, months, plants and helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

GRID_CELL_WIDTH = 5


@dataclass
class Captain:
    """A house captain's details."""

    house: str
    name: str
    class_number: int
    roll: int


@dataclass
class SchoolCaptain:
    """The school captain: a name and a class."""

    name: str
    class_number: int

    def show(self) -> str:
        """Return the captain's name and class as a short report."""
        return f"\n School Captain \nName: {self.name}\nclass: {self.class_number}"


class Month(IntEnum):
    """Months of the year, numbered from 1."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def title(self) -> str:
        """The month's name as it is written."""
        return self.name.capitalize()


def month_name(number: int) -> str:
    """Return the name of month ``number`` (1-12)."""
    try:
        return Month(number).title
    except ValueError:
        raise ValueError(f"invalid number!!! {number}") from None


class TransgenicPlant(Enum):
    """Transgenic plants, numbered from 1."""

    BT_COTTON = 1
    WHEAT = 2
    BRASSICA_NAPUS = 3
    GOLDEN_RICE = 4
    FLAVR_SAVR_TOMATO = 5


def triangle_area(base: float, height: float) -> float:
    """Return the area of a triangle."""
    if base < 0 or height < 0:
        raise ValueError("base and height must not be negative")
    return 0.5 * base * height


def swap(first: Any, second: Any) -> tuple[Any, Any]:
    """Return the two values in swapped order."""
    return second, first


def positive_shares(shares: Iterable[tuple[str, int]]) -> list[tuple[str, int]]:
    """Keep only the (group, percentage) pairs whose percentage is positive."""
    return [(group, value) for group, value in shares if value > 0]


def decode_marks(letters: Iterable[str]) -> list[int]:
    """Return the character code of each letter, the marks it stands for."""
    marks = []
    for letter in letters:
        if len(letter) != 1:
            raise ValueError(f"expected a single character: {letter!r}")
        marks.append(ord(letter))
    return marks


def format_grid(rows: Iterable[Iterable[int]]) -> str:
    """Render rows of integers, each right-aligned in a fixed-width cell."""
    return "".join(
        "".join(f"{value:{GRID_CELL_WIDTH}d} " for value in row) + "\n"
        for row in rows
    )


def resize(values: Sequence[Any], size: int) -> list:
    """Return ``values`` cut or grown to ``size``; new places hold 0."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    result = list(values[:size])
    result.extend([0] * (size - len(result)))
    return result