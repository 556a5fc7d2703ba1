"""Turning text and integer triples into people and colours."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import ParseIntError, parse_int

DEFAULT_NAME = "John"
DEFAULT_AGE = 30
_CHANNEL_MAX = 255


@dataclass(frozen=True)
class Person:
    """A person with a name and an age; Person() is the fallback person."""

    name: str = DEFAULT_NAME
    age: int = DEFAULT_AGE


def _split_person(text: str) -> tuple[str, str] | None:
    fields = text.split(",")
    if len(fields) != 2:
        return None
    name, age = fields
    return name, age


def person_from(text: str) -> Person:
    """Person from "name,age"; the default person when the text does not fit."""
    if not text:
        return Person()
    fields = _split_person(text)
    if fields is None:
        return Person()
    name, age_text = fields
    if not name:
        return Person()
    try:
        age = parse_int(age_text, bits=64, signed=False)
    except ParseIntError:
        return Person()
    return Person(name=name, age=age)


class ParsePersonError(ValueError):
    """Raised when text is not "name,age"."""

    class Kind(enum.Enum):
        EMPTY = "empty input"
        BAD_LEN = "incorrect number of fields"
        NO_NAME = "no name"
        PARSE_INT = "error parsing age"

    def __init__(
        self, kind: ParsePersonError.Kind, inner: ParseIntError | None = None
    ) -> None:
        message = kind.value if inner is None else f"{kind.value}: {inner}"
        super().__init__(message)
        self.kind = kind
        self.inner = inner

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePersonError):
            return NotImplemented
        return self.kind is other.kind and self.inner == other.inner

    def __hash__(self) -> int:
        return hash((self.kind, self.inner))


def parse_person(text: str) -> Person:
    """Parse "name,age", raising ParsePersonError when it cannot be done."""
    if not text:
        raise ParsePersonError(ParsePersonError.Kind.EMPTY)
    fields = _split_person(text)
    if fields is None:
        raise ParsePersonError(ParsePersonError.Kind.BAD_LEN)
    name, age_text = fields
    if not name:
        raise ParsePersonError(ParsePersonError.Kind.NO_NAME)
    try:
        age = parse_int(age_text, bits=64, signed=False)
    except ParseIntError as err:
        raise ParsePersonError(ParsePersonError.Kind.PARSE_INT, err) from err
    return Person(name=name, age=age)


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels from 0 to 255."""

    red: int
    green: int
    blue: int


class IntoColorError(ValueError):
    """Raised when values cannot form a colour."""

    class Kind(enum.Enum):
        BAD_LEN = "incorrect number of values"
        INT_CONVERSION = "value out of range 0..=255"

    def __init__(self, kind: IntoColorError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntoColorError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


def color_from(values: Iterable[int]) -> Color:
    """Colour from exactly three integers, each from 0 to 255."""
    channels = tuple(values)
    if len(channels) != 3:
        raise IntoColorError(IntoColorError.Kind.BAD_LEN)
    for channel in channels:
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise TypeError(f"colour channels must be integers, got {channel!r}")
        if not 0 <= channel <= _CHANNEL_MAX:
            raise IntoColorError(IntoColorError.Kind.INT_CONVERSION)
    red, green, blue = channels
    return Color(red=red, green=green, blue=blue)