"""Django settings for the theater statements project."""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-theater-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "") == "1"

INSTALLED_APPS = [
    "theater",
]

DATABASES = {}

USE_TZ = True

# Overrides for theater.conf.PricingConfig, amounts in cents.
THEATER_PRICING = {}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "theater": {
            "handlers": ["console"],
            "level": os.environ.get("THEATER_LOG_LEVEL", "WARNING"),
        },
    },
}
