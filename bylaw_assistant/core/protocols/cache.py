"""Cache protocol for dependency injection."""
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class CacheProtocol(Protocol):
    """Protocol for the search result cache."""

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if absent or expired."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a value, evicting the oldest entry when full."""
        ...

    def cleanup(self) -> None:
        """Purge expired entries."""
        ...
