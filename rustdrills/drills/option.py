"""Working with values that may be absent."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def print_number(maybe_number: int | None) -> None:
    """Print the number; a missing number is an error."""
    if maybe_number is None:
        raise ValueError("called print_number with no number")
    print(f"printing: {maybe_number}")


def computed_numbers() -> list[int | None]:
    """Five numbers computed from their positions, each one present."""
    return [((index * 1235) + 2) // (4 * 16) for index in range(5)]


def describe_word(optional_word: str | None) -> str:
    """Describe the word, or say that there is none."""
    if optional_word is not None:
        return f"The word is: {optional_word}"
    return "The optional word doesn't contain anything"


def drain_integers(values: Iterable[int | None] | None = None) -> list[int]:
    """Take values from the end until the list is empty or a gap is found.

    Without values, the numbers 1 to 9 are used. The input is left untouched.
    """
    stack = list(range(1, 10) if values is None else values)
    taken = []
    while stack and (integer := stack.pop()) is not None:
        print(f"current value: {integer}")
        taken.append(integer)
    return taken


@dataclass(frozen=True)
class Point:
    """A pair of coordinates."""

    x: int
    y: int


def describe_point(maybe_point: Point | None) -> str:
    """Describe the point's coordinates, or report that there is none."""
    match maybe_point:
        case Point(x=x, y=y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"