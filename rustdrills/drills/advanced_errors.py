"""Parsers whose errors wrap the lower-level errors that caused them."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import (
    CreationError,
    ParseFloatError,
    ParseIntError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    parse_float,
    parse_int,
)


def positive_nonzero_from_str(s: str) -> PositiveNonzeroInteger:
    """Parse text as a positive non-zero integer, wrapping any failure."""
    try:
        return PositiveNonzeroInteger(parse_int(s, bits=64, signed=True))
    except (ParseIntError, CreationError) as err:
        raise ParsePosNonzeroError(err) from err


class ParseClimateError(ValueError):
    """Raised when a climate record cannot be parsed."""

    class Kind(enum.Enum):
        EMPTY = "empty"
        BAD_LEN = "bad_len"
        NO_CITY = "no_city"
        PARSE_INT = "parse_int"
        PARSE_FLOAT = "parse_float"

    def __init__(
        self,
        kind: ParseClimateError.Kind,
        inner: ParseIntError | ParseFloatError | None = None,
    ) -> None:
        self.kind = kind
        self.inner = inner
        super().__init__(self._describe())

    def _describe(self) -> str:
        match self.kind:
            case ParseClimateError.Kind.EMPTY:
                return "empty input"
            case ParseClimateError.Kind.BAD_LEN:
                return "incorrect number of fields"
            case ParseClimateError.Kind.NO_CITY:
                return "no city name"
            case ParseClimateError.Kind.PARSE_INT:
                return f"error parsing year: {self.inner}"
            case ParseClimateError.Kind.PARSE_FLOAT:
                return f"error parsing temperature: {self.inner}"

    @property
    def source(self) -> ParseIntError | ParseFloatError | None:
        """The lower-level error, if there is one."""
        return self.inner

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseClimateError):
            return NotImplemented
        return self.kind is other.kind and self.inner == other.inner

    def __hash__(self) -> int:
        return hash((self.kind, self.inner))


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float


def parse_climate(text: str) -> Climate:
    """Parse "city,year,temperature"."""
    if not text:
        raise ParseClimateError(ParseClimateError.Kind.EMPTY)
    fields = text.split(",")
    if len(fields) != 3:
        raise ParseClimateError(ParseClimateError.Kind.BAD_LEN)
    city, year_text, temp_text = fields
    if not city:
        raise ParseClimateError(ParseClimateError.Kind.NO_CITY)
    try:
        year = parse_int(year_text, bits=32, signed=False)
    except ParseIntError as err:
        raise ParseClimateError(ParseClimateError.Kind.PARSE_INT, err) from err
    try:
        temp = parse_float(temp_text)
    except ParseFloatError as err:
        raise ParseClimateError(ParseClimateError.Kind.PARSE_FLOAT, err) from err
    return Climate(city=city, year=year, temp=temp)