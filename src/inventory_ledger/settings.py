"""
Minimal Django settings for running the inventory service.

No database, sessions or templates: the only state is the in-memory ledger.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "inventory-ledger-insecure-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "") == "1"

ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",") if h]

INSTALLED_APPS = ["inventory_ledger"]

MIDDLEWARE = ["django.middleware.common.CommonMiddleware"]

ROOT_URLCONF = "inventory_ledger.urls"

WSGI_APPLICATION = "inventory_ledger.wsgi.application"

DATABASES = {}

APPEND_SLASH = False

USE_TZ = True

INVENTORY_SEED_STOCK = {"P001": 100, "P002": 50}

INVENTORY_LOCK_TIMEOUT = 3.0

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "inventory_ledger": {
            "handlers": ["console"],
            "level": os.environ.get("INVENTORY_LOG_LEVEL", "INFO"),
        },
    },
}
