"""Small numeric, branching, character and string drills."""

from __future__ import annotations

from collections.abc import Sequence

NUMBER = 3

BIG_ARRAY_LENGTH = 100
BULK_APPLE_THRESHOLD = 40
COLOR_WORDS = frozenset({"green", "blue", "red"})


def calculate_apple_price(num: int) -> int:
    """Price of an order of apples: 2 each, or 1 each for more than 40."""
    if num <= BULK_APPLE_THRESHOLD:
        return num * 2
    return num


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def is_even(num: int) -> bool:
    """True for even numbers, negative ones included."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    """The square of a number."""
    return num * num


def ring_calls(num: int) -> list[str]:
    """One line per call, numbered from 1."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    if a > b:
        return a
    return b


def fizz_if_foo(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"


def character_kind(ch: str) -> str:
    """Describe a single character as alphabetical, numerical or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sequence[object]) -> str:
    """Comment on the size of a sequence."""
    if len(values) >= BIG_ARRAY_LENGTH:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that apply to the time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def current_favorite_color() -> str:
    """The current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """True when the word names a known colour."""
    return attempt in COLOR_WORDS


def string_values() -> list[str]:
    """A series of strings built by literals, slicing, trimming and replacing."""
    return [
        "blue",
        "red",
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]