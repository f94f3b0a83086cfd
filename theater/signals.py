"""Django signals for pricing config cache invalidation."""

from django.core.signals import setting_changed
from django.dispatch import receiver

from theater.conf import SETTINGS_NAME, get_pricing_config


@receiver(setting_changed)
def invalidate_pricing_config(sender, setting, **kwargs):
    """Drop the cached pricing config when THEATER_PRICING is overridden."""
    if setting == SETTINGS_NAME:
        get_pricing_config.cache_clear()
