"""In-memory value store indexed by hashed keys."""

import logging
from collections.abc import Callable
from threading import Lock

from securegame.security.key_indexer import KeyIndexer

logger = logging.getLogger(__name__)


class SecureDataStore:
    """
    Thread-safe mapping from key digest to an opaque string value.

    Plain keys are never retained, only their digest. There is no way to
    enumerate or delete entries.
    """

    def __init__(self, indexer: Callable[[str], str] | None = None):
        self._indexer = indexer if indexer is not None else KeyIndexer()
        self._entries: dict[str, str] = {}
        self._lock = Lock()

    def store(self, key: str, value: str) -> None:
        """
        Store a value under a key, overwriting any previous value.

        Args:
            key: Lookup key (hashed before use)
            value: Opaque value to keep
        """
        hashed_key = self._indexer(key)
        with self._lock:
            self._entries[hashed_key] = value
        logger.debug("Stored secure data at %s", hashed_key)

    def retrieve(self, key: str) -> str | None:
        """Return the value stored under a key, or None if nothing was stored."""
        hashed_key = self._indexer(key)
        with self._lock:
            return self._entries.get(hashed_key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
