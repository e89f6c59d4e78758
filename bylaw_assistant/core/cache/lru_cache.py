
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")


def monotonic_ms() -> float:
    return time.monotonic() * 1000


@dataclass
class CacheEntry(Generic[V]):
    value: V
    inserted_at: float


class ResultCache(Generic[V]):
    """Bounded in-process cache with lazy and eager TTL expiry.

    Entries live in insertion order. A hit moves the entry to the most
    recent end, so capacity eviction drops the entry least recently
    inserted or fetched. Safe for interleaved calls from several threads.
    """

    def __init__(
        self,
        capacity: int = 100,
        ttl_ms: float = 5 * 60 * 1000,
        clock: Callable[[], float] = monotonic_ms,
    ):
        """Initialize cache.

        Args:
            capacity: Max resident entries.
            ttl_ms: Entry lifetime in milliseconds.
            clock: Current time in milliseconds.
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")

        self._capacity = capacity
        self._ttl = ttl_ms
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry[V]] = OrderedDict()
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def ttl_ms(self) -> float:
        return self._ttl

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def keys(self) -> list[str]:
        """Resident keys, oldest first."""
        with self._lock:
            return list(self._entries)

    def get(self, key: str) -> Optional[V]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if self._clock() > entry.inserted_at + self._ttl:
                del self._entries[key]
                logger.debug(f"Cache expired: '{key[:50]}'")
                return None

            self._entries.move_to_end(key)
            return entry.value

    def set(self, key: str, value: V) -> None:
        with self._lock:
            self._entries.pop(key, None)

            if len(self._entries) >= self._capacity:
                oldest, _ = self._entries.popitem(last=False)
                logger.debug(f"Cache evicted: '{oldest[:50]}'")

            self._entries[key] = CacheEntry(value=value, inserted_at=self._clock())

    def cleanup(self) -> None:
        """Purge every entry whose TTL has elapsed."""
        with self._lock:
            now = self._clock()
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.inserted_at > self._ttl
            ]
            for key in expired:
                del self._entries[key]

        if expired:
            logger.debug(f"Cache cleanup: removed {len(expired)} expired entries")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
