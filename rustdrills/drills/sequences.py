"""Building, describing and walking lists without surprising the caller."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

FILL_VALUES = (22, 44, 66)


def fill_vec(vec: Iterable[int] | None = None) -> list[int]:
    """A new list: the given values followed by 22, 44 and 66."""
    return [*(vec or ()), *FILL_VALUES]


def describe_vec(label: str, vec: list[int]) -> str:
    """One line naming the list, its length and its contents."""
    return f"{label} has length {len(vec)} content `{list(vec)!r}`"


def add_through_references(start: int = 100) -> int:
    """Add 100 and then 1000 to the starting value, one step at a time."""
    x = start
    x += 100
    x += 1000
    return x


def favorite_fruits() -> Iterator[str]:
    """An iterator over the favourite fruits."""
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])