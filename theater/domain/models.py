"""Domain models for invoices and the statements computed from them.

These are pure domain objects with no loading or persistence rules.
Plays are owned by an external catalog, see theater/stores.
"""

from dataclasses import dataclass

from theater.domain.value_objects import Money


@dataclass(frozen=True)
class Play:
    """A play in the catalog.

    The genre is kept as the raw catalog string and only resolved when the
    play is priced, so an unrecognized genre fails the statement, not the
    catalog.
    """

    name: str
    genre: str


@dataclass(frozen=True)
class Performance:
    """One performance of a play on an invoice."""

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if isinstance(self.audience, bool) or not isinstance(self.audience, int):
            raise ValueError("Audience must be an integer")
        if self.audience <= 0:
            raise ValueError("Audience must be positive")


@dataclass(frozen=True)
class Invoice:
    """A customer's performances, in billing order."""

    customer: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "performances", tuple(self.performances))


@dataclass(frozen=True)
class StatementLine:
    """Priced and credited line item for a single performance."""

    play_name: str
    amount: Money
    credits: int
    audience: int


@dataclass(frozen=True)
class Statement:
    """Computed statement for one invoice."""

    customer: str
    lines: tuple[StatementLine, ...] = ()

    @property
    def total_amount(self) -> Money:
        return sum((line.amount for line in self.lines), Money(0))

    @property
    def total_credits(self) -> int:
        return sum(line.credits for line in self.lines)
