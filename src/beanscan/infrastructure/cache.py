"""Bounded, thread-safe cache of type models keyed by class.

Entries are evicted oldest-inserted first once the capacity is exceeded.
This only bounds memory: an evicted model stays valid for anyone still
holding it, and the next ``scan()`` simply rebuilds an equal model.

Concurrent scans of an unseen class may both miss and both build. The
first ``put`` wins and later racers get the retained model back.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanscan.domain.model import TypeModel

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


class TypeModelCache:
    """Insertion-ordered ``class -> TypeModel`` map guarded by one lock."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            msg = f"Cache capacity must be positive, got {capacity}"
            raise ValueError(msg)
        self._capacity = capacity
        self._entries: OrderedDict[type, TypeModel] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, raw_type: type) -> TypeModel | None:
        with self._lock:
            return self._entries.get(raw_type)

    def put(self, raw_type: type, model: TypeModel) -> TypeModel:
        """Insert *model* unless one is already cached; return the cached one."""
        with self._lock:
            existing = self._entries.get(raw_type)
            if existing is not None:
                return existing
            self._entries[raw_type] = model
            while len(self._entries) > self._capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted type model for %s", evicted.__qualname__)
            return model

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, raw_type: object) -> bool:
        with self._lock:
            return raw_type in self._entries


_shared: TypeModelCache | None = None
_shared_lock = threading.Lock()


def get_cache() -> TypeModelCache:
    """The process-wide cache, created on first use with the configured capacity."""
    global _shared
    with _shared_lock:
        if _shared is None:
            from beanscan.config.settings import get_settings

            _shared = TypeModelCache(get_settings().cache_size)
        return _shared


def clear_cache() -> None:
    """Drop every cached model. Outstanding references stay usable."""
    get_cache().clear()
