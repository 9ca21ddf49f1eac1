from .api import lock
from .exceptions import (
    InsufficientStockError,
    InventoryError,
    LockAcquireTimeout,
    ValidationError,
)
from .ledger import Ledger
from .models import OrderRequest, OrderResult, StockCheck

__all__ = [
    "Ledger",
    "OrderRequest",
    "OrderResult",
    "StockCheck",
    "lock",
    "InventoryError",
    "ValidationError",
    "InsufficientStockError",
    "LockAcquireTimeout",
]
