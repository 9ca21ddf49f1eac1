from __future__ import annotations

import logging
from typing import Iterator, Mapping

from .api import LockBackend, lock, stock_key
from .backends.memory import ThreadLockBackend
from .exceptions import InsufficientStockError, ValidationError
from .models import OrderRequest, OrderResult, StockCheck

logger = logging.getLogger(__name__)


def _validate_seed(stock: Mapping[str, int]) -> dict[str, int]:
    seed: dict[str, int] = {}
    for product_id, quantity in stock.items():
        if not isinstance(product_id, str) or not product_id:
            raise ValueError(f"product id must be a non-empty string, got {product_id!r}")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise ValueError(
                f"stock for {product_id!r} must be a non-negative integer, got {quantity!r}"
            )
        seed[product_id] = quantity
    return seed


class Ledger:
    """
    Authoritative in-memory stock counts per product.

    Built once at startup and shared by every request handler. Orders are the
    only mutation: each one checks and decrements its product's counter while
    holding that product's lock, so concurrent orders cannot both spend the
    same units. Stock checks read the counter without locking; their answer is
    advisory and may be stale by the time an order arrives.

    Parameters
    ----------
    stock : Mapping[str, int]
        Seed catalog. Copied; later changes to the mapping are not seen.

    lock_timeout : float | None, default=3.0
        Seconds an order waits for its product lock before giving up with
        LockAcquireTimeout. None waits forever.

    backend : LockBackend | None
        Lock backend. Defaults to a private ThreadLockBackend.

    Notes
    -----
    Quantities are not required to be positive. A zero or negative quantity
    passes both comparisons, and a negative order adds units back.
    """

    def __init__(
        self,
        stock: Mapping[str, int],
        *,
        lock_timeout: float | None = 3.0,
        backend: LockBackend | None = None,
    ) -> None:
        self._stock = _validate_seed(stock)
        self._lock_timeout = lock_timeout
        self._backend = backend or ThreadLockBackend()

    def __repr__(self) -> str:
        return f"<Ledger products={len(self._stock)}>"

    def __len__(self) -> int:
        return len(self._stock)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._stock

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._stock))

    @property
    def lock_timeout(self) -> float | None:
        return self._lock_timeout

    def products(self) -> list[str]:
        return sorted(self._stock)

    def quantity_of(self, product_id: str) -> int | None:
        """Remaining stock of a product, or None if it is not in the catalog."""
        return self._stock.get(product_id)

    def snapshot(self) -> dict[str, int]:
        """Copy of all counters."""
        return dict(self._stock)

    def check_stock(self, product_id: str, quantity: int) -> StockCheck:
        """
        Report whether `product_id` currently has at least `quantity` units.

        Unknown products are simply unavailable; this never raises and never
        changes the ledger.
        """
        remaining = self._stock.get(product_id)
        available = remaining is not None and remaining >= quantity
        return StockCheck(product_id=product_id, available=available)

    def create_order(self, request: OrderRequest) -> OrderResult:
        """
        Take `request.quantity` units of `request.product_id` out of stock.

        Raises
        ------
        ValidationError
            If the product id is missing or empty.
        InsufficientStockError
            If the product is unknown or has fewer units than requested.
        LockAcquireTimeout
            If the product lock is not acquired within `lock_timeout`.

        Nothing is changed when any of these is raised.
        """
        product_id = request.product_id
        quantity = request.quantity

        if not product_id:
            raise ValidationError()

        with lock(stock_key(product_id), timeout=self._lock_timeout, backend=self._backend):
            remaining = self._stock.get(product_id)
            if remaining is None or remaining < quantity:
                logger.info(
                    "Rejected order product=%s quantity=%s remaining=%s",
                    product_id,
                    quantity,
                    remaining,
                )
                raise InsufficientStockError(product_id, quantity, remaining)

            self._stock[product_id] = remaining - quantity

        logger.info(
            "Order created product=%s quantity=%s remaining=%s",
            product_id,
            quantity,
            remaining - quantity,
        )
        return OrderResult.created()

    def place_order(self, product_id: str | None, quantity: int) -> OrderResult:
        """Build an OrderRequest from the arguments and pass it to `create_order`."""
        return self.create_order(OrderRequest(product_id=product_id, quantity=quantity))
