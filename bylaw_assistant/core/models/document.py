"""Document domain models."""
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Chunk:
    """Bylaw text chunk for indexing."""
    content: str
    bylaw_number: str
    title: str
    section: str
    source: str
    file_hash: str
    chunk_index: int

    @property
    def id(self) -> str:
        return f"{self.bylaw_number}_{self.file_hash}_{self.chunk_index}"


@dataclass
class VectorRecord:
    """Vector plus metadata, as upserted into the index."""
    id: str
    values: list[float]
    metadata: dict[str, Any]


@dataclass
class VectorMatch:
    """Raw scored match returned by the vector index."""
    id: str
    score: float
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return str(self.metadata.get("text") or "")
