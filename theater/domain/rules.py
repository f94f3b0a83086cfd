"""Pricing and volume credit rules, one function per genre.

Rules are pure functions of the audience and a PricingConfig. Callers
resolve the genre string with Genre.from_string, which raises
UnknownPlayTypeError for anything without a rule.
"""

from collections.abc import Callable

from theater.conf import PricingConfig
from theater.domain.value_objects import Genre

Rule = Callable[[int, PricingConfig], int]


def tragedy_amount(audience: int, config: PricingConfig) -> int:
    amount = config.tragedy_base_amount
    if audience > config.tragedy_audience_threshold:
        amount += config.tragedy_extra_amount_per_person * (
            audience - config.tragedy_audience_threshold
        )
    return amount


def comedy_amount(audience: int, config: PricingConfig) -> int:
    amount = config.comedy_base_amount
    if audience > config.comedy_audience_threshold:
        amount += config.comedy_over_base_capacity_amount + (
            config.comedy_over_base_capacity_per_person
            * (audience - config.comedy_audience_threshold)
        )
    amount += config.comedy_amount_per_audience * audience
    return amount


def base_credits(audience: int, config: PricingConfig) -> int:
    return max(audience - config.base_volume_credit_threshold, 0)


def comedy_credits(audience: int, config: PricingConfig) -> int:
    return base_credits(audience, config) + audience // config.comedy_extra_volume_factor


AMOUNT_RULES: dict[Genre, Rule] = {
    Genre.TRAGEDY: tragedy_amount,
    Genre.COMEDY: comedy_amount,
}

CREDIT_RULES: dict[Genre, Rule] = {
    Genre.TRAGEDY: base_credits,
    Genre.COMEDY: comedy_credits,
}


def amount_for(genre: Genre | str, audience: int, config: PricingConfig | None = None) -> int:
    """Return the amount owed in cents for one performance.

    Raises:
        UnknownPlayTypeError: If the genre has no pricing rule.
    """
    if not isinstance(genre, Genre):
        genre = Genre.from_string(genre)
    return AMOUNT_RULES[genre](audience, config or PricingConfig())


def credits_for(genre: Genre | str, audience: int, config: PricingConfig | None = None) -> int:
    """Return the volume credits earned for one performance.

    Raises:
        UnknownPlayTypeError: If the genre has no crediting rule.
    """
    if not isinstance(genre, Genre):
        genre = Genre.from_string(genre)
    return CREDIT_RULES[genre](audience, config or PricingConfig())
