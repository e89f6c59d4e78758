from types import SimpleNamespace

import pytest

from bylaw_assistant.core.models.document import VectorRecord
from bylaw_assistant.core.models.search import SearchFilters
from bylaw_assistant.infrastructure.vector_stores import chroma_store
from bylaw_assistant.infrastructure.vector_stores.chroma_store import ChromaVectorStore
from bylaw_assistant.infrastructure.vector_stores.pinecone_store import PineconeVectorStore


class FakeIndex:
    def __init__(self):
        self.queries: list[dict] = []
        self.upserts: list[dict] = []
        self.fail_list = False

    def query(self, **kwargs):
        self.queries.append(kwargs)
        return SimpleNamespace(
            matches=[
                SimpleNamespace(id="4742_x_0", score=0.88, metadata={"bylawNumber": "4742", "text": "t"}),
                SimpleNamespace(id="3210_y_0", score=None, metadata=None),
            ]
        )

    def upsert(self, vectors, namespace):
        self.upserts.append({"vectors": vectors, "namespace": namespace})

    def list(self, namespace):
        if self.fail_list:
            raise RuntimeError("pod indexes cannot list")
        yield ["a", "b"]

    def fetch(self, ids, namespace):
        return SimpleNamespace(
            vectors={i: SimpleNamespace(metadata={"fileHash": f"h-{i}"}) for i in ids}
        )


def record(i: int) -> VectorRecord:
    return VectorRecord(id=f"r{i}", values=[0.1], metadata={"text": f"chunk {i}"})


def test_pinecone_query_maps_matches():
    index = FakeIndex()
    store = PineconeVectorStore(api_key="", namespace="bylaws", index=index)

    matches = store.query([0.1, 0.2], top_k=3, filters=SearchFilters(bylawNumber="4742"))

    assert index.queries == [
        {
            "vector": [0.1, 0.2],
            "top_k": 3,
            "include_metadata": True,
            "namespace": "bylaws",
            "filter": {"bylawNumber": {"$eq": "4742"}},
        }
    ]
    assert matches[0].score == 0.88
    assert matches[0].text == "t"
    assert matches[1].score == 0.0
    assert matches[1].metadata == {}


def test_pinecone_query_without_filters():
    index = FakeIndex()
    PineconeVectorStore(api_key="", index=index).query([0.1])

    assert "filter" not in index.queries[0]


def test_pinecone_upsert_batches():
    index = FakeIndex()
    store = PineconeVectorStore(api_key="", upsert_batch_size=2, index=index)

    store.upsert([record(i) for i in range(5)])

    assert [len(u["vectors"]) for u in index.upserts] == [2, 2, 1]
    assert index.upserts[0]["vectors"][0] == {
        "id": "r0",
        "values": [0.1],
        "metadata": {"text": "chunk 0"},
    }


def test_pinecone_metadatas():
    index = FakeIndex()
    store = PineconeVectorStore(api_key="", index=index)

    assert store.get_all_metadatas() == [{"fileHash": "h-a"}, {"fileHash": "h-b"}]

    index.fail_list = True
    assert store.get_all_metadatas() == []


def test_pinecone_requires_key():
    with pytest.raises(RuntimeError):
        PineconeVectorStore(api_key="").index


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise RuntimeError(f"HTTP {self.status_code}")


class FakeRequests:
    def __init__(self, query_payload=None):
        self.posts: list[tuple[str, dict]] = []
        self.query_payload = query_payload or {}

    def get(self, url, timeout):
        return FakeResponse([{"name": "oak_bay_bylaws", "id": "col-1"}])

    def post(self, url, json, timeout):
        self.posts.append((url, json))
        if url.endswith("/query"):
            return FakeResponse(self.query_payload)
        return FakeResponse({})


def test_chroma_query(monkeypatch):
    fake = FakeRequests(
        {
            "ids": [["4742_x_0"]],
            "documents": [["A permit is required."]],
            "metadatas": [[{"bylawNumber": "4742"}]],
            "distances": [[0.25]],
        }
    )
    monkeypatch.setattr(chroma_store, "requests", fake)

    matches = ChromaVectorStore().query([0.1], top_k=2, filters=SearchFilters(category="Trees"))

    url, body = fake.posts[0]
    assert url.endswith("/collections/col-1/query")
    assert body["n_results"] == 2
    assert body["where"] == {"category": {"$eq": "Trees"}}
    assert matches[0].score == 0.75
    assert matches[0].text == "A permit is required."


def test_chroma_upsert_uses_text_as_document(monkeypatch):
    fake = FakeRequests()
    monkeypatch.setattr(chroma_store, "requests", fake)

    ChromaVectorStore().upsert([record(0)])

    url, body = fake.posts[0]
    assert url.endswith("/collections/col-1/upsert")
    assert body["documents"] == ["chunk 0"]
    assert body["ids"] == ["r0"]
