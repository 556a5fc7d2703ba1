"""Strict number parsing, name tags, token costs and positive integers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

PROCESSING_FEE = 1
COST_PER_ITEM = 5

_DIGITS = frozenset("0123456789")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class ParseIntError(ValueError):
    """Raised when text is not an integer of the requested width."""

    class Kind(enum.Enum):
        EMPTY = "cannot parse integer from empty string"
        INVALID_DIGIT = "invalid digit found in string"
        POS_OVERFLOW = "number too large to fit in target type"
        NEG_OVERFLOW = "number too small to fit in target type"

    def __init__(self, kind: ParseIntError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseIntError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class ParseFloatError(ValueError):
    """Raised when text is not a floating point literal."""

    class Kind(enum.Enum):
        EMPTY = "cannot parse float from empty string"
        INVALID = "invalid float literal"

    def __init__(self, kind: ParseFloatError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseFloatError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


def parse_int(text: str, bits: int = 32, signed: bool = True) -> int:
    """Parse a decimal integer that must fit in the given width."""
    if not text:
        raise ParseIntError(ParseIntError.Kind.EMPTY)
    negative = False
    digits = text
    if text[0] in "+-":
        if len(text) == 1:
            raise ParseIntError(ParseIntError.Kind.INVALID_DIGIT)
        if text[0] == "+":
            digits = text[1:]
        elif signed:
            negative = True
            digits = text[1:]
    if not set(digits) <= _DIGITS:
        raise ParseIntError(ParseIntError.Kind.INVALID_DIGIT)
    value = -int(digits) if negative else int(digits)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if value > high:
        raise ParseIntError(ParseIntError.Kind.POS_OVERFLOW)
    if value < low:
        raise ParseIntError(ParseIntError.Kind.NEG_OVERFLOW)
    return value


def parse_float(text: str) -> float:
    """Parse a floating point literal without surrounding spaces or underscores."""
    if not text:
        raise ParseFloatError(ParseFloatError.Kind.EMPTY)
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ParseFloatError(ParseFloatError.Kind.INVALID)
    return float(text)


class NametagError(ValueError):
    """Raised when a name tag cannot be made."""


def generate_nametag_text(name: str) -> str:
    """Name tag text for a non-empty name."""
    if not name:
        raise NametagError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity of items, fee included."""
    quantity = parse_int(item_quantity, bits=32, signed=True)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("attempt to multiply with overflow")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> tuple[int, str]:
    """Buy the typed quantity if affordable; return the tokens left and a message."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return tokens, "You can't afford that many!"
    tokens -= cost
    return tokens, f"You now have {tokens} tokens."


class CreationError(ValueError):
    """Raised when a value cannot be a positive non-zero integer."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: CreationError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised when text is not a positive non-zero integer; wraps the cause."""

    def __init__(self, cause: CreationError | ParseIntError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePosNonzeroError):
            return NotImplemented
        return type(self.cause) is type(other.cause) and self.cause == other.cause

    def __hash__(self) -> int:
        return hash(self.cause)


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text as a positive non-zero integer."""
    try:
        value = parse_int(s, bits=64, signed=True)
    except ParseIntError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err