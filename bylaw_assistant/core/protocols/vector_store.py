"""Vector store protocol for dependency injection."""
from typing import Optional, Protocol, runtime_checkable

from ..models.document import VectorMatch, VectorRecord
from ..models.search import SearchFilters


@runtime_checkable
class VectorStoreProtocol(Protocol):
    """Protocol for the hosted vector index."""

    def upsert(self, records: list[VectorRecord]) -> None:
        """Insert or replace vectors.

        Args:
            records: Vectors with ids and metadata.
        """
        ...

    def query(
        self,
        vector: list[float],
        top_k: int = 5,
        filters: Optional[SearchFilters] = None,
    ) -> list[VectorMatch]:
        """Top-K similarity search.

        Args:
            vector: Query vector.
            top_k: Number of matches to return.
            filters: Structured metadata filters.

        Returns:
            Scored matches with metadata, best first.
        """
        ...

    def get_all_metadatas(self) -> list[dict]:
        """Get all stored metadatas."""
        ...
