"""Protocol interfaces for dependency injection."""
from .embedder import EmbedderProtocol
from .vector_store import VectorStoreProtocol
from .cache import CacheProtocol

__all__ = [
    "EmbedderProtocol",
    "VectorStoreProtocol",
    "CacheProtocol",
]
