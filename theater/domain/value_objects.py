"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from theater.domain.errors import UnknownPlayTypeError
from theater.formatting import usd


class Genre(Enum):
    """Play genres that have pricing and crediting rules."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value)
        except ValueError:
            raise UnknownPlayTypeError(value) from None


@dataclass(frozen=True)
class Money:
    """Amount in cents."""

    cents: int

    def __post_init__(self) -> None:
        if self.cents < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.cents + other.cents)

    def __str__(self) -> str:
        return usd(self.cents)
