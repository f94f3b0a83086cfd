"""Statement service - all pricing orchestration lives here.

Services:
- Depend only on interfaces (stores)
- Resolve plays and genres, raising domain errors on failure
- Return domain models or rendered text, never partial results
"""

import logging
from collections.abc import Mapping

from theater.conf import PricingConfig, get_pricing_config
from theater.domain import (
    Genre,
    Invoice,
    Money,
    Performance,
    Play,
    Statement,
    StatementLine,
    UnknownPlayError,
)
from theater.domain.rules import amount_for, credits_for
from theater.formatting import render_text
from theater.stores import InMemoryPlayStore, PlayStore

logger = logging.getLogger(__name__)


class StatementService:
    """Service for computing and rendering invoice statements."""

    def __init__(self, store: PlayStore, config: PricingConfig | None = None) -> None:
        self._store = store
        self._config = config

    @property
    def config(self) -> PricingConfig:
        return self._config or get_pricing_config()

    def get_play(self, performance: Performance) -> Play:
        """Return the play a performance refers to.

        Raises:
            UnknownPlayError: If the play is not in the store.
        """
        play = self._store.get_play(performance.play_id)
        if play is None:
            logger.debug("Play %r not found in catalog", performance.play_id)
            raise UnknownPlayError(performance.play_id)
        return play

    def build_line(self, performance: Performance, config: PricingConfig) -> StatementLine:
        play = self.get_play(performance)
        genre = Genre.from_string(play.genre)
        return StatementLine(
            play_name=play.name,
            amount=Money(amount_for(genre, performance.audience, config)),
            credits=credits_for(genre, performance.audience, config),
            audience=performance.audience,
        )

    def build_statement(self, invoice: Invoice) -> Statement:
        """Price and credit every performance of an invoice, in order.

        Raises:
            UnknownPlayError: If a performance refers to an unknown play.
            UnknownPlayTypeError: If a play's genre has no pricing rule.
        """
        config = self.config
        lines = tuple(self.build_line(p, config) for p in invoice.performances)
        logger.debug(
            "Built statement for %s with %d line(s)", invoice.customer, len(lines)
        )
        return Statement(customer=invoice.customer, lines=lines)

    def total_amount(self, invoice: Invoice) -> Money:
        return self.build_statement(invoice).total_amount

    def total_credits(self, invoice: Invoice) -> int:
        return self.build_statement(invoice).total_credits

    def render(self, invoice: Invoice) -> str:
        """Return the text statement for an invoice."""
        return render_text(self.build_statement(invoice))


def render(
    invoice: Invoice,
    catalog: Mapping[str, Play] | PlayStore,
    config: PricingConfig | None = None,
) -> str:
    """Render the statement for an invoice against a play catalog."""
    store = catalog if isinstance(catalog, PlayStore) else InMemoryPlayStore(catalog)
    return StatementService(store, config).render(invoice)
