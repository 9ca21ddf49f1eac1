from __future__ import annotations

import logging

from django.apps import AppConfig, apps
from django.core.exceptions import ImproperlyConfigured

from . import conf
from .ledger import Ledger

logger = logging.getLogger(__name__)


class InventoryLedgerConfig(AppConfig):
    name = "inventory_ledger"
    verbose_name = "Inventory ledger"

    ledger: Ledger

    def ready(self) -> None:
        # One ledger per process; handlers reach it through get_ledger().
        try:
            self.ledger = Ledger(conf.get_seed_stock(), lock_timeout=conf.get_lock_timeout())
        except ValueError as e:
            raise ImproperlyConfigured(f"INVENTORY_SEED_STOCK is invalid: {e}") from e
        logger.info("Inventory ledger ready with %d products", len(self.ledger))


def get_ledger() -> Ledger:
    """The ledger built at startup."""
    return apps.get_app_config(InventoryLedgerConfig.name).ledger
