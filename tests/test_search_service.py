import pytest

from bylaw_assistant.core.errors import SearchFailed
from bylaw_assistant.core.models.search import SearchQuery
from bylaw_assistant.core.services.search_service import SearchService

from .conftest import FakeVectorStore, make_match


class BrokenCache:
    def get(self, key):
        raise RuntimeError("cache down")

    def set(self, key, value):
        raise RuntimeError("cache down")

    def cleanup(self):
        pass


def test_repeated_query_served_from_cache(search_service, embedder, store):
    first = search_service.execute({"query": "tree removal permit"})
    second = search_service.execute({"query": "tree removal permit"})

    assert first.success and second.success
    assert first.from_cache is False
    assert second.from_cache is True
    assert second.results == first.results
    assert len(embedder.calls) == 1
    assert len(store.queries) == 1


def test_cache_key_ignores_case(search_service, store):
    search_service.execute({"query": "Tree Removal"})
    response = search_service.execute({"query": "tree removal"})

    assert response.from_cache is True
    assert len(store.queries) == 1


def test_different_options_miss_cache(search_service, store):
    search_service.execute({"query": "tree removal", "limit": 5})
    search_service.execute({"query": "tree removal", "limit": 3})

    assert len(store.queries) == 2


def test_results_below_min_score_dropped(search_service):
    response = search_service.execute({"query": "tree removal", "minScore": 0.5})

    assert [r.id for r in response.results] == ["a", "b"]
    assert response.count == 2


def test_limit_passed_as_top_k_and_applied(search_service, store):
    response = search_service.execute({"query": "tree removal", "limit": 1})

    assert store.queries[0]["top_k"] == 1
    assert response.count == 1


def test_filters_forwarded_to_index(search_service, store):
    search_service.execute(
        {"query": "tree removal", "filters": {"bylawNumber": "4742", "category": "Environment"}}
    )

    filters = store.queries[0]["filters"]
    assert filters.bylaw_number == "4742"
    assert filters.category == "Environment"


def test_empty_index_is_success(embedder, cache):
    service = SearchService(embedder, FakeVectorStore([]), cache)

    response = service.execute({"query": "parking on boulevards"})

    assert response.success
    assert response.to_dict() == {
        "success": True,
        "query": "parking on boulevards",
        "count": 0,
        "fromCache": False,
        "results": [],
    }


def test_missing_metadata_gets_defaults(embedder, cache):
    store = FakeVectorStore(
        [make_match("m", 0.9, "", bylawNumber=None, title=None, url=None, category=None)]
    )
    service = SearchService(embedder, store, cache)

    item = service.search(SearchQuery.parse({"query": "anything at all"}))[0]

    assert item.bylaw_number == "Unknown"
    assert item.title == "Untitled Bylaw"
    assert item.section == "3.1"
    assert item.url == "https://oakbay.civicweb.net/document/bylaw/Unknown?section=3.1"
    assert item.metadata.category == "Unknown"
    assert item.metadata.date_enacted == "Unknown"


def test_result_serialization(search_service):
    body = search_service.execute({"query": "tree removal"}).to_dict()
    first = body["results"][0]

    assert first["bylawNumber"] == "4742"
    assert first["section"] == "3.1"
    assert first["metadata"]["category"] == "Environment"
    assert first["metadata"]["lastUpdated"] == "Unknown"


def test_index_failure_reports_search_failed(embedder, cache):
    store = FakeVectorStore(error=ConnectionError("index unreachable"))
    service = SearchService(embedder, store, cache)

    response = service.execute({"query": "tree removal"})

    assert response.status == 500
    assert response.to_dict() == {"success": False, "error": "Search failed"}
    assert len(cache) == 0


def test_failed_search_is_retried_next_call(embedder, cache):
    store = FakeVectorStore(error=ConnectionError("index unreachable"))
    service = SearchService(embedder, store, cache)

    service.execute({"query": "tree removal"})
    service.execute({"query": "tree removal"})

    assert len(store.queries) == 2


def test_search_raises_chained_error(embedder, cache):
    cause = TimeoutError("slow")
    service = SearchService(embedder, FakeVectorStore(error=cause), cache)

    with pytest.raises(SearchFailed) as excinfo:
        service.search(SearchQuery.parse({"query": "tree removal"}))

    assert excinfo.value.__cause__ is cause


@pytest.mark.parametrize(
    "payload",
    [
        {"query": "a"},
        {"query": "x" * 501},
        {"query": "tree removal", "limit": 0},
        {"query": "tree removal", "limit": 21},
        {"query": "tree removal", "minScore": 1.5},
        {},
    ],
)
def test_invalid_request_rejected_before_search(search_service, embedder, payload):
    response = search_service.execute(payload)

    assert response.status == 400
    assert response.success is False
    assert response.error == "Invalid search parameters"
    assert response.details
    assert embedder.calls == []


def test_cache_fault_treated_as_miss(embedder, store):
    service = SearchService(embedder, store, BrokenCache())

    first = service.execute({"query": "tree removal"})
    second = service.execute({"query": "tree removal"})

    assert first.success and second.success
    assert second.from_cache is False
    assert len(store.queries) == 2


def test_cache_key_normalizes_case_and_tracks_options():
    a = SearchQuery.parse({"query": "Leaf Blower", "limit": 3})
    b = SearchQuery.parse({"query": "leaf blower", "limit": 3})
    c = SearchQuery.parse({"query": "leaf blower", "limit": 3, "useOptimized": False})

    assert a.cache_key() == b.cache_key()
    assert a.cache_key() != c.cache_key()


class FailingStrategy:
    def apply(self, query, results):
        raise ValueError("bad score")


def test_non_string_text_is_coerced(embedder, cache):
    store = FakeVectorStore([make_match("n", 0.9, 4742)])
    service = SearchService(embedder, store, cache)

    response = service.execute({"query": "tree 4742"})

    assert response.success
    assert response.results[0].content == "4742"


def test_ranking_failure_reports_search_failed(embedder, store, cache):
    service = SearchService(embedder, store, cache, strategies=[FailingStrategy()])

    response = service.execute({"query": "tree removal"})

    assert response.status == 500
    assert response.to_dict() == {"success": False, "error": "Search failed"}
    assert len(cache) == 0
