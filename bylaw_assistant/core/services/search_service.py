"""Search service - cached bylaw vector search."""

import logging
from typing import Any, Optional

from ..catalog.bylaws import BylawCatalog
from ..errors import SearchFailed, ValidationFailed
from ..models.document import VectorMatch
from ..models.search import (
    ResultMetadata,
    SearchQuery,
    SearchResponse,
    SearchResultItem,
)
from ..protocols.cache import CacheProtocol
from ..protocols.embedder import EmbedderProtocol
from ..protocols.vector_store import VectorStoreProtocol
from ..strategies.scoring import (
    HybridKeywordStrategy,
    ScoreFloorStrategy,
    ScoringStrategy,
)

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
UNTITLED = "Untitled Bylaw"


class SearchService:
    """Bylaw search with an injected result cache and scoring strategies."""

    def __init__(
        self,
        embedder: EmbedderProtocol,
        vector_store: VectorStoreProtocol,
        cache: CacheProtocol,
        catalog: Optional[BylawCatalog] = None,
        strategies: list[ScoringStrategy] | None = None,
    ):
        """Initialize search service.

        Args:
            embedder: Embedding service.
            vector_store: Vector index.
            cache: Result cache shared by all callers.
            catalog: Bylaw catalog for fallback document URLs.
            strategies: Custom scoring strategies.
        """
        self._embedder = embedder
        self._vector_store = vector_store
        self._cache = cache
        self._catalog = catalog or BylawCatalog()

        self._strategies = strategies or [
            ScoreFloorStrategy(),
            HybridKeywordStrategy(),
        ]

    def search(self, query: SearchQuery) -> list[SearchResultItem]:
        """Search bylaws, serving repeated queries from the cache.

        Args:
            query: Validated search query.

        Returns:
            Formatted results. Empty when nothing matched.

        Raises:
            SearchFailed: If the embedding provider or vector index failed.
        """
        results, _ = self._search(query)
        return results

    def execute(self, payload: dict[str, Any]) -> SearchResponse:
        """Validate a raw request and return the response envelope.

        Never raises for validation or search failures; they are reported
        as `success=False` envelopes.
        """
        try:
            query = SearchQuery.parse(payload)
        except ValidationFailed as e:
            logger.warning(f"Invalid search request: {e.details}")
            return SearchResponse.failed(str(e), e.details, status=400)

        try:
            results, from_cache = self._search(query)
        except SearchFailed as e:
            logger.error(f"Bylaw search error: {e}")
            return SearchResponse.failed("Search failed", status=500)

        return SearchResponse(
            success=True, query=query.text, results=results, from_cache=from_cache
        )

    def _search(self, query: SearchQuery) -> tuple[list[SearchResultItem], bool]:
        key = query.cache_key()

        cached = self._cache_get(key)
        if cached is not None:
            logger.info(f"Search cache hit: {len(cached)} results for '{query.text[:50]}'")
            return list(cached), True

        try:
            vector = self._embedder.embed(query.text)
            matches = self._vector_store.query(
                vector=vector, top_k=query.limit, filters=query.filters
            )
        except Exception as e:
            raise SearchFailed(f"Search failed for '{query.text[:50]}': {e}") from e

        try:
            results = [self._to_item(m) for m in matches]
            for strategy in self._strategies:
                results = strategy.apply(query, results)
        except Exception as e:
            raise SearchFailed(f"Could not rank results for '{query.text[:50]}': {e}") from e

        results = results[: query.limit]

        logger.info(
            f"Search: returned {len(results)}/{query.limit} bylaw chunks "
            f"for '{query.text[:50]}...'"
        )

        self._cache_set(key, results)
        return list(results), False

    def _to_item(self, match: VectorMatch) -> SearchResultItem:
        meta = match.metadata
        bylaw_number = str(meta.get("bylawNumber") or UNKNOWN)
        section = str(meta.get("section") or UNKNOWN)

        return SearchResultItem(
            id=match.id,
            bylaw_number=bylaw_number,
            title=str(meta.get("title") or UNTITLED),
            section=section,
            content=match.text,
            url=str(meta.get("url") or self._catalog.document_url(bylaw_number, section)),
            score=float(match.score or 0.0),
            metadata=ResultMetadata(
                category=str(meta.get("category") or UNKNOWN),
                date_enacted=str(meta.get("dateEnacted") or UNKNOWN),
                last_updated=str(meta.get("lastUpdated") or UNKNOWN),
            ),
        )

    def _cache_get(self, key: str) -> Optional[list[SearchResultItem]]:
        try:
            return self._cache.get(key)
        except Exception as e:
            logger.warning(f"Cache read failed, treating as miss: {e}")
            return None

    def _cache_set(self, key: str, results: list[SearchResultItem]) -> None:
        try:
            self._cache.set(key, results)
        except Exception as e:
            logger.warning(f"Cache write failed: {e}")
