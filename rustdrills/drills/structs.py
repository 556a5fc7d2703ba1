"""Plain records, positional records, marker values and a parcel with fees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    """A colour described by name and hex code."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour as a (name, hex) pair."""

    name: str
    hex: str


@dataclass(frozen=True, repr=False)
class UnitStruct:
    """A value with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """An order to copy and adjust."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A parcel travelling between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("this is a terrible mistake!")

    def is_international(self) -> bool:
        """True for parcels sent from Spain to Russia."""
        if self.weight_in_grams <= 0:
            return False
        return self.sender_country == "Spain" and self.recipient_country == "Russia"

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fee for the parcel's weight."""
        return self.weight_in_grams * cents_per_gram