import logging
from typing import Any, Optional

from pinecone import Pinecone

from bylaw_assistant.core.models.document import VectorMatch, VectorRecord
from bylaw_assistant.core.models.search import SearchFilters

from .filters import build_metadata_filter

logger = logging.getLogger(__name__)


class PineconeVectorStore:
    """Vector store backed by a hosted Pinecone index."""

    def __init__(
        self,
        api_key: str,
        index_name: str = "oak-bay-bylaws",
        namespace: str = "",
        upsert_batch_size: int = 100,
        index: Any = None,
    ):
        """Initialize Pinecone client.

        Args:
            api_key: Pinecone API key.
            index_name: Index holding the bylaw chunks.
            namespace: Index namespace ("" is the default namespace).
            upsert_batch_size: Vectors per upsert request.
            index: Preconfigured index handle (tests).
        """
        self._api_key = api_key
        self._index_name = index_name
        self._namespace = namespace
        self._upsert_batch_size = upsert_batch_size
        self._index = index

    @property
    def index(self) -> Any:
        """Lazy connect to the index."""
        if self._index is None:
            if not self._api_key:
                raise RuntimeError("Pinecone API key must be set (PINECONE_API_KEY)")
            logger.info(f"Connecting to Pinecone index: {self._index_name}")
            self._index = Pinecone(api_key=self._api_key).Index(self._index_name)
        return self._index

    def upsert(self, records: list[VectorRecord]) -> None:
        for i in range(0, len(records), self._upsert_batch_size):
            batch = records[i : i + self._upsert_batch_size]
            self.index.upsert(
                vectors=[
                    {"id": r.id, "values": r.values, "metadata": r.metadata}
                    for r in batch
                ],
                namespace=self._namespace,
            )
            logger.debug(f"Upserted {len(batch)} vectors into {self._index_name}")

    def query(
        self,
        vector: list[float],
        top_k: int = 5,
        filters: Optional[SearchFilters] = None,
    ) -> list[VectorMatch]:
        kwargs: dict[str, Any] = {
            "vector": vector,
            "top_k": top_k,
            "include_metadata": True,
            "namespace": self._namespace,
        }
        metadata_filter = build_metadata_filter(filters)
        if metadata_filter:
            kwargs["filter"] = metadata_filter

        response = self.index.query(**kwargs)

        return [
            VectorMatch(
                id=match.id,
                score=match.score or 0.0,
                metadata=dict(match.metadata or {}),
            )
            for match in (response.matches or [])
        ]

    def get_all_metadatas(self) -> list[dict]:
        """Get all stored metadatas (serverless indexes only)."""
        metadatas: list[dict] = []
        try:
            for ids in self.index.list(namespace=self._namespace):
                fetched = self.index.fetch(ids=list(ids), namespace=self._namespace)
                metadatas.extend(dict(v.metadata or {}) for v in fetched.vectors.values())
        except Exception as e:
            logger.warning(f"Could not list Pinecone vectors: {e}")
            return []
        return metadatas
