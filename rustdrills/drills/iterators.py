"""Capitalising words, dividing lists, factorials and counting progress."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

NUMBERS = (27, 297, 38502, 81)
DIVISOR = 27
_U64_MAX = (1 << 64) - 1


def capitalize_first(text: str) -> str:
    """The text with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Every word with its first character in upper case."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """The capitalised words joined into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """Raised when one integer cannot be divided exactly by another."""


@dataclass(frozen=True)
class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    dividend: int
    divisor: int

    def __str__(self) -> str:
        return f"{self.dividend} is not divisible by {self.divisor}"


@dataclass(frozen=True)
class DivideByZero(DivisionError):
    """The divisor is zero."""

    def __str__(self) -> str:
        return "division by zero"


def divide(a: int, b: int) -> int:
    """a divided by b when b divides a exactly."""
    if b == 0:
        raise DivideByZero()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def _attempt(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def result_with_list() -> list[int]:
    """Every number divided by 27; the first failure is raised."""
    return [divide(n, DIVISOR) for n in NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Every number divided by 27, each entry a quotient or the error it gave."""
    return [_attempt(n, DIVISOR) for n in NUMBERS]


def factorial(num: int) -> int:
    """num! for a non-negative num whose factorial fits in 64 unsigned bits."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Entries with the given progress, counted with a loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Entries with the given progress across several maps, counted with loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Entries with the given progress across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)