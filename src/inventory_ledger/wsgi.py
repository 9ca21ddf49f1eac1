"""WSGI entry point, e.g. ``gunicorn inventory_ledger.wsgi``."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "inventory_ledger.settings")

application = get_wsgi_application()
