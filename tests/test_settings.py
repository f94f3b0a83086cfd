"""Tests for settings-driven pricing config.

Run with: pytest tests/test_settings.py -v
"""

import pytest
from django.core.exceptions import ImproperlyConfigured

from theater.conf import PricingConfig, get_pricing_config
from theater.domain import Invoice, Performance
from theater.services import StatementService


class TestPricingConfig:
    """Tests for PricingConfig.from_settings."""

    def test_defaults_without_overrides(self, settings):
        """No THEATER_PRICING gives the default constants."""
        settings.THEATER_PRICING = {}
        assert get_pricing_config() == PricingConfig()

    def test_overrides_are_applied(self, settings):
        """Keys in THEATER_PRICING override matching fields."""
        settings.THEATER_PRICING = {"comedy_base_amount": 3000}
        assert get_pricing_config().comedy_base_amount == 3000
        assert get_pricing_config().tragedy_base_amount == 40000

    def test_unknown_key_is_improperly_configured(self, settings):
        """Unknown keys raise ImproperlyConfigured."""
        settings.THEATER_PRICING = {"comedy_base": 3000}
        with pytest.raises(ImproperlyConfigured):
            get_pricing_config()

    def test_non_integer_value_is_improperly_configured(self, settings):
        """Values must be integers."""
        settings.THEATER_PRICING = {"comedy_base_amount": "3000"}
        with pytest.raises(ImproperlyConfigured):
            get_pricing_config()

    def test_zero_volume_factor_is_improperly_configured(self, settings):
        """A zero comedy volume factor is rejected."""
        settings.THEATER_PRICING = {"comedy_extra_volume_factor": 0}
        with pytest.raises(ImproperlyConfigured):
            get_pricing_config()


    def test_negative_amount_is_improperly_configured(self, settings):
        """Negative amounts in THEATER_PRICING are rejected."""
        settings.THEATER_PRICING = {"tragedy_base_amount": -5000}
        with pytest.raises(ImproperlyConfigured):
            get_pricing_config()

class TestCacheInvalidation:
    """Tests for config cache invalidation on settings changes."""

    def test_setting_change_invalidates_cached_config(self, settings):
        """Changing THEATER_PRICING drops the cached config."""
        settings.THEATER_PRICING = {}
        assert get_pricing_config().tragedy_base_amount == 40000
        settings.THEATER_PRICING = {"tragedy_base_amount": 50000}
        assert get_pricing_config().tragedy_base_amount == 50000

    def test_service_reads_settings_config(self, settings, play_store):
        """A service without an explicit config prices with the settings."""
        settings.THEATER_PRICING = {"tragedy_base_amount": 50000}
        invoice = Invoice(customer="BigCo", performances=(Performance("hamlet", 10),))
        assert "  Hamlet: $500.00 (10 seats)" in StatementService(play_store).render(invoice)
