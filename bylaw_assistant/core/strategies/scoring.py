
import logging
import re
from abc import ABC, abstractmethod

from ..models.search import SearchQuery, SearchResultItem

logger = logging.getLogger(__name__)


class ScoringStrategy(ABC):
    """Base class for scoring strategies."""

    @abstractmethod
    def apply(
        self, query: SearchQuery, results: list[SearchResultItem]
    ) -> list[SearchResultItem]:
        """Apply strategy to results."""
        ...


class ScoreFloorStrategy(ScoringStrategy):
    """Drop results below the query's minimum similarity."""

    def apply(
        self, query: SearchQuery, results: list[SearchResultItem]
    ) -> list[SearchResultItem]:
        filtered = [r for r in results if r.score >= query.min_score]

        if len(filtered) < len(results):
            logger.info(
                f"Score floor: {len(results)} → {len(filtered)} "
                f"(min_score={query.min_score:.2f})"
            )

        return filtered


class HybridKeywordStrategy(ScoringStrategy):
    """Re-order optimized searches by vector similarity blended with keyword hits.

    Item scores keep the raw similarity; only the order changes.
    """

    STOP_WORDS = frozenset({
        "a", "an", "the", "in", "on", "at", "of", "for", "to", "with", "by",
        "and", "or", "but", "if", "then", "else", "when", "up", "down", "is",
        "are", "was", "were", "be", "been", "being", "have", "has", "had",
        "do", "does", "did", "shall", "will", "should", "would", "may", "might",
        "must", "can", "could",
    })

    def __init__(self, vector_weight: float = 0.7, keyword_weight: float = 0.3):
        """Initialize strategy.

        Args:
            vector_weight: Weight of the similarity score.
            keyword_weight: Weight of the keyword hit ratio.
        """
        self._vector_weight = vector_weight
        self._keyword_weight = keyword_weight

    def extract_keywords(self, text: str) -> list[str]:
        """Unique lowercase query words, minus stop words and short words."""
        cleaned = re.sub(r"[^\w\s]", " ", text.lower())
        keywords: list[str] = []
        for word in cleaned.split():
            if len(word) > 2 and word not in self.STOP_WORDS and word not in keywords:
                keywords.append(word)
        return keywords

    def keyword_score(self, keywords: list[str], content: str) -> float:
        if not keywords:
            return 0.0
        content_lower = content.lower()
        hits = sum(1 for k in keywords if k in content_lower)
        return hits / len(keywords)

    def apply(
        self, query: SearchQuery, results: list[SearchResultItem]
    ) -> list[SearchResultItem]:
        if not query.use_optimized or len(results) < 2:
            return results

        keywords = self.extract_keywords(query.text)
        if not keywords:
            return results

        def blended(item: SearchResultItem) -> float:
            return (
                item.score * self._vector_weight
                + self.keyword_score(keywords, item.content) * self._keyword_weight
            )

        reordered = sorted(results, key=blended, reverse=True)

        if reordered != results:
            logger.info(f"Hybrid rerank: reordered {len(results)} results (keywords: {keywords})")

        return reordered
