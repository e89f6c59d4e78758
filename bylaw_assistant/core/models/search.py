"""Search domain models."""
import json
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationFailed


class SearchFilters(BaseModel):
    """Structured filters passed through to the vector index."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    category: Optional[str] = None
    bylaw_number: Optional[str] = Field(default=None, alias="bylawNumber")
    date_from: Optional[str] = Field(default=None, alias="dateFrom")
    date_to: Optional[str] = Field(default=None, alias="dateTo")

    def to_dict(self) -> dict[str, str]:
        """Non-empty filters keyed by their wire names."""
        return {
            k: v
            for k, v in self.model_dump(by_alias=True, exclude_none=True).items()
            if v != ""
        }


class SearchQuery(BaseModel):
    """Validated, immutable search request.

    Text plus options fully determine the cache key. The acting user is
    deliberately not part of it so results are shared between users.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    text: str = Field(min_length=2, max_length=500, alias="query")
    filters: Optional[SearchFilters] = None
    limit: int = Field(default=5, ge=1, le=20)
    min_score: float = Field(default=0.5, ge=0.0, le=1.0, alias="minScore")
    use_optimized: bool = Field(default=True, alias="useOptimized")

    @classmethod
    def parse(cls, payload: dict[str, Any]) -> "SearchQuery":
        """Build a query from a request payload.

        Args:
            payload: Request body (`query`, `filters`, `limit`, ...).

        Returns:
            Validated query.

        Raises:
            ValidationFailed: If the payload is malformed.
        """
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            details = json.loads(e.json(include_url=False))
            raise ValidationFailed("Invalid search parameters", details) from e

    def cache_key(self) -> str:
        """Case-normalized text plus a stable serialization of the options."""
        options = {
            "limit": self.limit,
            "minScore": self.min_score,
            "filters": self.filters.to_dict() if self.filters else None,
            "optimized": self.use_optimized,
        }
        return f"{self.text.lower()}_{json.dumps(options, sort_keys=True)}"


@dataclass(frozen=True)
class ResultMetadata:
    category: str = "Unknown"
    date_enacted: str = "Unknown"
    last_updated: str = "Unknown"


@dataclass(frozen=True)
class SearchResultItem:
    """Formatted search hit, read-only once created."""
    id: str
    bylaw_number: str
    title: str
    section: str
    content: str
    url: str
    score: float
    metadata: ResultMetadata = field(default_factory=ResultMetadata)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "bylawNumber": self.bylaw_number,
            "title": self.title,
            "section": self.section,
            "content": self.content,
            "url": self.url,
            "score": self.score,
            "metadata": {
                "category": self.metadata.category,
                "dateEnacted": self.metadata.date_enacted,
                "lastUpdated": self.metadata.last_updated,
            },
        }


@dataclass
class SearchResponse:
    """Response envelope for the presentation layer."""
    success: bool
    query: str = ""
    results: list[SearchResultItem] = field(default_factory=list)
    from_cache: bool = False
    error: Optional[str] = None
    details: Optional[list[dict[str, Any]]] = None
    status: int = 200

    @property
    def count(self) -> int:
        return len(self.results)

    @classmethod
    def failed(
        cls,
        error: str,
        details: Optional[list[dict[str, Any]]] = None,
        status: int = 500,
    ) -> "SearchResponse":
        return cls(success=False, error=error, details=details, status=status)

    def to_dict(self) -> dict[str, Any]:
        if not self.success:
            body: dict[str, Any] = {"success": False, "error": self.error}
            if self.details:
                body["details"] = self.details
            return body

        return {
            "success": True,
            "query": self.query,
            "count": self.count,
            "fromCache": self.from_cache,
            "results": [r.to_dict() for r in self.results],
        }
