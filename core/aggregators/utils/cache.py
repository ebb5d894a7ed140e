"""
Read-through cache for aggregated items.

Wraps Django's cache framework so the backend (LocMem, Redis, Memcached)
is chosen by settings alone. Concurrent callers asking for the same key
share one computation.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

from django.core.cache import cache

logger = logging.getLogger(__name__)


class _KeyLock:
    """Lock for one key plus the number of threads holding or awaiting it."""

    def __init__(self):
        self.lock = threading.Lock()
        self.users = 0


_key_locks: Dict[str, _KeyLock] = {}
_key_locks_guard = threading.Lock()

# Stored instead of None so a cached "no value" is distinguishable from a miss
_MISSING = object()


@contextmanager
def _locked(key: str) -> Iterator[None]:
    """Hold the lock for key; the entry is dropped once its last user leaves."""
    with _key_locks_guard:
        entry = _key_locks.get(key)
        if entry is None:
            entry = _key_locks[key] = _KeyLock()
        entry.users += 1

    try:
        with entry.lock:
            yield
    finally:
        with _key_locks_guard:
            entry.users -= 1
            if entry.users == 0:
                del _key_locks[key]


def try_get(key: str, producer: Callable[[], Any], timeout: Optional[int] = None) -> Any:
    """
    Return the cached value for key, computing and storing it on a miss.

    At most one thread computes a given key at a time; the others wait
    and then read the stored value.

    Args:
        key: Cache key
        producer: Zero-argument callable producing the value
        timeout: Expiry in seconds (None uses the backend default)

    Returns:
        Cached or freshly computed value
    """
    value = cache.get(key, _MISSING)
    if value is not _MISSING:
        logger.debug(f"Cache hit: {key}")
        return value

    with _locked(key):
        value = cache.get(key, _MISSING)
        if value is not _MISSING:
            logger.debug(f"Cache hit after wait: {key}")
            return value

        logger.debug(f"Cache miss: {key}")
        value = producer()
        if timeout is None:
            cache.set(key, value)
        else:
            cache.set(key, value, timeout=timeout)
        return value


def clear() -> None:
    """Drop every cached entry."""
    cache.clear()
