"""In-process search result cache."""
from .lru_cache import CacheEntry, ResultCache
from .sweeper import CacheSweeper

__all__ = [
    "CacheEntry",
    "ResultCache",
    "CacheSweeper",
]
