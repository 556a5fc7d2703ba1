"""Fruit baskets held in dictionaries, and simple list building."""

from __future__ import annotations

import enum
from collections.abc import Iterable

NEW_FRUIT_COUNT = 2


def fruit_basket() -> dict[str, int]:
    """A basket with several kinds of fruit."""
    basket = {"banana": 2}
    basket["orange"] = 3
    basket["apple"] = 3
    basket["juice"] = 3
    basket["orange"] = 3
    return basket


class Fruit(enum.Enum):
    """Kinds of fruit."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add every missing kind of fruit to the basket, leaving present ones alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, NEW_FRUIT_COUNT)
    return basket


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """The same numbers as a fixed tuple and as a list."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(values: Iterable[int]) -> list[int]:
    """Every value doubled."""
    return [value * 2 for value in values]