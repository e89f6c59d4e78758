"""Core business services."""
from .search_service import SearchService
from .citation_service import CitationService
from .answer_service import AnswerService
from .ingest_service import IngestService

__all__ = [
    "SearchService",
    "CitationService",
    "AnswerService",
    "IngestService",
]
