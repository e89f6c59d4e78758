"""Error taxonomy for the search and citation layer."""
from typing import Any


class BylawAssistantError(Exception):
    """Base class for errors surfaced to callers."""


class ValidationFailed(BylawAssistantError):
    """Malformed search request. Reported to the caller, never retried."""

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.details = details or []


class SearchFailed(BylawAssistantError):
    """Embedding provider or vector index call failed."""
