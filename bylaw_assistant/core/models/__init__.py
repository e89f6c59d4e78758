"""Domain models."""
from .bylaw import AnswerTopic, BylawAnswer, BylawInfo
from .citation import Citation, Segment
from .document import Chunk, VectorMatch, VectorRecord
from .search import (
    ResultMetadata,
    SearchFilters,
    SearchQuery,
    SearchResponse,
    SearchResultItem,
)

__all__ = [
    "AnswerTopic",
    "BylawAnswer",
    "BylawInfo",
    "Citation",
    "Segment",
    "Chunk",
    "VectorMatch",
    "VectorRecord",
    "ResultMetadata",
    "SearchFilters",
    "SearchQuery",
    "SearchResponse",
    "SearchResultItem",
]
