from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Protocol

from .backends.memory import ThreadLockBackend
from .exceptions import LockAcquireTimeout

logger = logging.getLogger(__name__)


class LockBackend(Protocol):
    """
    What the ledger needs from a lock: take a key within a timeout, give it back.

    `acquire` returns False instead of raising when the timeout expires.
    """
    def acquire(self, key: str, timeout: float | None) -> bool: ...
    def release(self, key: str) -> None: ...


# Shared by callers of lock() that bring no backend. A Ledger brings its own.
_default_backend: LockBackend = ThreadLockBackend()


def stock_key(product_id: str) -> str:
    """Lock key guarding the stock counter of one product."""
    return f"stock:{product_id}"


@contextmanager
def lock(
    key: str,
    timeout: float | None = 3.0,
    backend: LockBackend | None = None,
) -> Iterator[None]:
    """
    Hold `key` for the duration of the block.

    A Ledger wraps each order's stock check and decrement in
    ``lock(stock_key(product_id))``, so two orders for the same product run
    one after the other while orders for other products proceed.

    Parameters
    ----------
    key : str
        Lock name, normally built with `stock_key`.

    timeout : float | None, default=3.0
        Seconds to wait for the key. None waits as long as it takes.

    backend : LockBackend | None
        Where the lock lives. Without one, a process-wide ThreadLockBackend
        is used.

    Raises
    ------
    LockAcquireTimeout
        If the key is still held by someone else when the timeout expires.
        The block does not run.

    Example
    -------
    >>> with lock(stock_key("P001"), timeout=0.5):
    ...     stock["P001"] -= 3
    """
    be = backend or _default_backend

    acquired = be.acquire(key, timeout)

    if not acquired:
        logger.warning("Lock %r not acquired within %ss", key, timeout)
        raise LockAcquireTimeout(
            f"Failed to acquire lock for key='{key}' within timeout={timeout}s"
        )

    try:
        yield
    finally:
        be.release(key)
