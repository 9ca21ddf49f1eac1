import threading


class ThreadLockBackend:
    """
    In-process lock backend built on `threading.Lock`.

    Each key gets its own lock, created on first use and kept for the lifetime
    of the backend. The set of keys is bounded by the product catalog, so
    locks are never evicted.

    Key properties
    --------------
    - Process-local: only threads of the current process compete. This matches
      the ledger, whose state lives in process memory as well.
    - Per-key: holding "stock:P001" never blocks "stock:P002".
    - Non-reentrant: a thread that acquires the same key twice without
      releasing will wait on itself until the timeout expires.

    Timeout behavior
    ----------------
    - timeout=None:
        Blocks indefinitely until the lock is acquired.

    - timeout=float:
        Waits at most that many seconds. A value <= 0 makes a single
        non-blocking attempt.
    """

    def __init__(self) -> None:
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, key: str) -> threading.Lock:
        # Guarded so two threads racing on a new key share one lock.
        with self._registry_lock:
            found = self._locks.get(key)
            if found is None:
                found = self._locks[key] = threading.Lock()
            return found

    def acquire(self, key: str, timeout: float | None) -> bool:
        """
        Attempt to acquire the lock for the given key.

        Returns
        -------
        bool
            True if the lock was acquired.
            False if the timeout expired before acquisition.
        """
        key_lock = self._lock_for(key)

        if timeout is None:
            return key_lock.acquire()

        if timeout <= 0:
            return key_lock.acquire(blocking=False)

        return key_lock.acquire(timeout=timeout)

    def release(self, key: str) -> None:
        """
        Release the lock for the given key.

        Raises
        ------
        RuntimeError
            If the key is not currently held.
        """
        with self._registry_lock:
            key_lock = self._locks.get(key)

        if key_lock is None:
            raise RuntimeError(f"release of unknown lock key={key!r}")

        key_lock.release()

    def is_locked(self, key: str) -> bool:
        """Whether some thread currently holds the given key."""
        with self._registry_lock:
            key_lock = self._locks.get(key)
        return key_lock is not None and key_lock.locked()
