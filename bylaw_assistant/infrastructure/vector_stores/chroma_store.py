import logging
from typing import Optional

import requests

from bylaw_assistant.core.models.document import VectorMatch, VectorRecord
from bylaw_assistant.core.models.search import SearchFilters

from .filters import build_metadata_filter

logger = logging.getLogger(__name__)


class ChromaVectorStore:
    """Vector store using ChromaDB HTTP API."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 8001,
        collection_name: str = "oak_bay_bylaws",
        tenant: str = "default_tenant",
        database: str = "default_database",
        timeout: float = 30.0,
    ):
        """Initialize ChromaDB client.

        Args:
            host: ChromaDB host.
            port: ChromaDB port.
            collection_name: Collection name.
            tenant: Tenant name.
            database: Database name.
            timeout: Request timeout in seconds.
        """
        self._base_url = f"http://{host}:{port}/api/v2"
        self._tenant = tenant
        self._database = database
        self._collection_name = collection_name
        self._timeout = timeout
        self._collection_id: Optional[str] = None

    @property
    def _collections_url(self) -> str:
        return f"{self._base_url}/tenants/{self._tenant}/databases/{self._database}/collections"

    def _ensure_collection(self) -> str:
        """Get or create collection, return ID."""
        if self._collection_id:
            return self._collection_id

        resp = requests.get(self._collections_url, timeout=self._timeout)
        if resp.status_code == 200:
            for col in resp.json():
                if col["name"] == self._collection_name:
                    self._collection_id = col["id"]
                    return self._collection_id

        resp = requests.post(
            self._collections_url,
            json={"name": self._collection_name, "metadata": {"hnsw:space": "cosine"}},
            timeout=self._timeout,
        )
        resp.raise_for_status()
        self._collection_id = resp.json()["id"]
        logger.info(f"Created collection: {self._collection_name}")
        return self._collection_id

    def upsert(self, records: list[VectorRecord]) -> None:
        """Upsert records; chunk text is stored as the Chroma document."""
        if not records:
            return

        col_id = self._ensure_collection()
        resp = requests.post(
            f"{self._collections_url}/{col_id}/upsert",
            json={
                "ids": [r.id for r in records],
                "embeddings": [r.values for r in records],
                "documents": [r.metadata.get("text", "") for r in records],
                "metadatas": [r.metadata for r in records],
            },
            timeout=self._timeout,
        )
        resp.raise_for_status()

    def query(
        self,
        vector: list[float],
        top_k: int = 5,
        filters: Optional[SearchFilters] = None,
    ) -> list[VectorMatch]:
        """Search by embedding. Raises on HTTP errors."""
        col_id = self._ensure_collection()
        body = {
            "query_embeddings": [vector],
            "n_results": top_k,
            "include": ["documents", "metadatas", "distances"],
        }
        where = build_metadata_filter(filters)
        if where:
            body["where"] = where

        resp = requests.post(
            f"{self._collections_url}/{col_id}/query", json=body, timeout=self._timeout
        )
        resp.raise_for_status()

        data = resp.json()
        matches = []

        if data.get("ids") and data["ids"][0]:
            for i, match_id in enumerate(data["ids"][0]):
                metadata = dict(data["metadatas"][0][i] or {})
                metadata.setdefault("text", data["documents"][0][i] or "")

                matches.append(
                    VectorMatch(
                        id=match_id,
                        score=1.0 - data["distances"][0][i],
                        metadata=metadata,
                    )
                )

        return matches

    def get_all_metadatas(self) -> list[dict]:
        """Get all document metadatas."""
        col_id = self._ensure_collection()
        resp = requests.post(
            f"{self._collections_url}/{col_id}/get",
            json={"include": ["metadatas"]},
            timeout=self._timeout,
        )
        if resp.status_code == 200:
            return resp.json().get("metadatas", [])
        return []
