from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_SEED_STOCK: dict[str, int] = {"P001": 100, "P002": 50}
DEFAULT_LOCK_TIMEOUT: float | None = 3.0


def get_seed_stock() -> dict[str, int]:
    """Catalog the ledger starts from, from ``INVENTORY_SEED_STOCK``."""
    seed = getattr(settings, "INVENTORY_SEED_STOCK", DEFAULT_SEED_STOCK)
    if not isinstance(seed, dict):
        raise ImproperlyConfigured(
            f"INVENTORY_SEED_STOCK must be a dict, got {type(seed).__name__}"
        )
    return dict(seed)


def get_lock_timeout() -> float | None:
    """Seconds an order waits for its product lock, from ``INVENTORY_LOCK_TIMEOUT``."""
    timeout = getattr(settings, "INVENTORY_LOCK_TIMEOUT", DEFAULT_LOCK_TIMEOUT)
    if timeout is None:
        return None
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
        raise ImproperlyConfigured(
            f"INVENTORY_LOCK_TIMEOUT must be None or a non-negative number, got {timeout!r}"
        )
    return float(timeout)
