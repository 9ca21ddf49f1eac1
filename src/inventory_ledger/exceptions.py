"""
Exception hierarchy for inventory_ledger.

Every failure the ledger reports is an `InventoryError`. The HTTP layer maps
the subclasses onto status codes; the `message` attribute is what callers see
in the JSON failure payload.
"""

from __future__ import annotations


class InventoryError(Exception):
    """
    Base exception for all inventory_ledger errors.

    Example
    -------
    >>> try:
    ...     ledger.place_order("P001", 3)
    ... except InventoryError as exc:
    ...     return OrderResult.failure(exc)
    """

    #: Error code for programmatic handling.
    code: str = "inventory_error"

    #: Caller-facing message used when none is given.
    default_message: str = "An unspecified inventory error occurred."

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = self.default_message
        super().__init__(message)
        self.message = message


class ValidationError(InventoryError):
    """
    Raised when an order request is malformed, e.g. the product id is missing.

    The ledger is never touched when this is raised.
    """

    code: str = "validation_error"
    default_message: str = "ProductId is required."


class InsufficientStockError(InventoryError):
    """
    Raised when the requested quantity exceeds the remaining stock.

    An unknown product is reported the same way; `available` is None then.
    """

    code: str = "insufficient_stock"
    default_message: str = "Insufficient stock."

    def __init__(
        self,
        product_id: str,
        requested: int,
        available: int | None,
        message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.product_id = product_id
        self.requested = requested
        self.available = available


class LockAcquireTimeout(InventoryError):
    """
    Raised when a product lock cannot be acquired within the specified timeout.

    This typically indicates that many concurrent orders target the same
    product, or that the timeout value is too low.

    Example
    -------
    >>> try:
    ...     with lock("stock:P001", timeout=1):
    ...         decrement()
    ... except LockAcquireTimeout:
    ...     retry_later()
    """

    code: str = "lock_acquire_timeout"
    default_message: str = "Inventory busy, try again."
