"""Pricing configuration.

Defaults can be overridden per project with the ``THEATER_PRICING`` setting::

    THEATER_PRICING = {
        "comedy_base_amount": 30000,
        "comedy_audience_threshold": 20,
    }
"""

from dataclasses import dataclass, fields
from functools import lru_cache
from typing import Self

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

SETTINGS_NAME = "THEATER_PRICING"

AMOUNT_FIELDS = (
    "tragedy_base_amount",
    "tragedy_extra_amount_per_person",
    "comedy_base_amount",
    "comedy_over_base_capacity_amount",
    "comedy_over_base_capacity_per_person",
    "comedy_amount_per_audience",
)


@dataclass(frozen=True)
class PricingConfig:
    """Numeric constants of the pricing and volume credit rules.

    Amounts are in cents.
    """

    tragedy_base_amount: int = 40000
    tragedy_extra_amount_per_person: int = 1000
    tragedy_audience_threshold: int = 30
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_base_capacity_amount: int = 10000
    comedy_over_base_capacity_per_person: int = 500
    comedy_amount_per_audience: int = 300
    base_volume_credit_threshold: int = 30
    comedy_extra_volume_factor: int = 5

    def __post_init__(self) -> None:
        for name in AMOUNT_FIELDS:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.comedy_extra_volume_factor <= 0:
            raise ValueError("comedy_extra_volume_factor must be positive")

    @classmethod
    def from_settings(cls) -> Self:
        overrides = getattr(settings, SETTINGS_NAME, None) or {}
        if not isinstance(overrides, dict):
            raise ImproperlyConfigured(f"{SETTINGS_NAME} must be a dict")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ImproperlyConfigured(
                f"Unknown {SETTINGS_NAME} keys: {', '.join(unknown)}"
            )
        for key, value in overrides.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ImproperlyConfigured(f"{SETTINGS_NAME}[{key!r}] must be an integer")

        try:
            return cls(**overrides)
        except ValueError as exc:
            raise ImproperlyConfigured(str(exc)) from exc


@lru_cache(maxsize=1)
def get_pricing_config() -> PricingConfig:
    """Return the project pricing config, built once from settings."""
    return PricingConfig.from_settings()
