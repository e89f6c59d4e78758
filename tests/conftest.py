from typing import Optional

import pytest

from bylaw_assistant.core.cache import ResultCache
from bylaw_assistant.core.models.document import VectorMatch, VectorRecord
from bylaw_assistant.core.models.search import SearchFilters
from bylaw_assistant.core.services.search_service import SearchService


class FakeEmbedder:
    def __init__(self):
        self.calls: list[str] = []
        self.batches: list[list[str]] = []

    def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        return [0.1, 0.2, 0.3]

    def embed_batch(self, texts: list[str]) -> list[list[float]]:
        self.batches.append(list(texts))
        return [[0.1, 0.2, 0.3] for _ in texts]


class FakeVectorStore:
    def __init__(self, matches: Optional[list[VectorMatch]] = None, error: Exception | None = None):
        self.matches = matches or []
        self.error = error
        self.queries: list[dict] = []
        self.records: list[VectorRecord] = []

    def query(self, vector, top_k=5, filters: Optional[SearchFilters] = None):
        self.queries.append({"vector": vector, "top_k": top_k, "filters": filters})
        if self.error:
            raise self.error
        return list(self.matches)

    def upsert(self, records: list[VectorRecord]) -> None:
        self.records.extend(records)

    def get_all_metadatas(self) -> list[dict]:
        return [r.metadata for r in self.records]


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_match(id: str, score: float, text: str, **metadata) -> VectorMatch:
    meta = {
        "bylawNumber": "4742",
        "title": "Tree Protection Bylaw",
        "section": "3.1",
        "text": text,
        "url": f"https://example.test/{id}",
        "category": "Environment",
    }
    meta.update(metadata)
    return VectorMatch(id=id, score=score, metadata=meta)


@pytest.fixture
def embedder():
    return FakeEmbedder()


@pytest.fixture
def store():
    return FakeVectorStore(
        [
            make_match("a", 0.91, "A permit is required to cut a protected tree."),
            make_match("b", 0.72, "Arbutus trees of 10 cm or greater are protected."),
            make_match("c", 0.31, "Unrelated boulevard text."),
        ]
    )


@pytest.fixture
def cache():
    return ResultCache(capacity=10, ttl_ms=60_000)


@pytest.fixture
def search_service(embedder, store, cache):
    return SearchService(embedder=embedder, vector_store=store, cache=cache)
