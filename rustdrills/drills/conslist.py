"""A recursive cons list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    """A list with no items."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A list with one item."""
    return Cons(1, Nil())