"""
StoreHandle – the single reference the request handlers read the store through.

Handlers call `handle.current` once per request and work with that store for
the rest of the request. Replacing the store is a single reference assignment,
so a request sees either the old store or the new one, never a mix.
"""

import logging
import threading

from .base import BaseUserStore

log = logging.getLogger("usersvc.storage")


class StoreHandle:
    """Holds the active store and swaps it atomically."""

    def __init__(self, store: BaseUserStore) -> None:
        self._store = store
        self._swap_lock = threading.Lock()

    @property
    def current(self) -> BaseUserStore:
        return self._store

    def swap(self, store: BaseUserStore) -> BaseUserStore:
        """
        Replace the active store.

        Returns:
            BaseUserStore: The store that was active before the swap.
        """
        with self._swap_lock:
            previous = self._store
            self._store = store
        log.info("User store swapped: %s -> %s", type(previous).__name__, type(store).__name__)
        return previous
