from bylaw_assistant.core.models.search import SearchQuery, SearchResultItem
from bylaw_assistant.core.strategies import HybridKeywordStrategy, ScoreFloorStrategy


def item(id: str, score: float, content: str) -> SearchResultItem:
    return SearchResultItem(
        id=id,
        bylaw_number="4742",
        title="Tree Protection Bylaw",
        section="1",
        content=content,
        url="",
        score=score,
    )


def test_extract_keywords():
    strategy = HybridKeywordStrategy()
    assert strategy.extract_keywords("The tree, the TREE and a permit!") == ["tree", "permit"]


def test_keyword_score():
    strategy = HybridKeywordStrategy()
    assert strategy.keyword_score(["tree", "permit"], "Tree permits") == 1.0
    assert strategy.keyword_score(["tree", "permit"], "boulevards") == 0.0
    assert strategy.keyword_score([], "anything") == 0.0


def test_hybrid_reorders_without_changing_scores():
    query = SearchQuery.parse({"query": "tree permit"})
    results = [
        item("vector-only", 0.80, "Boulevard maintenance schedule."),
        item("keyword", 0.75, "A tree permit is required."),
    ]

    reordered = HybridKeywordStrategy().apply(query, results)

    assert [r.id for r in reordered] == ["keyword", "vector-only"]
    assert [r.score for r in reordered] == [0.75, 0.80]


def test_hybrid_skipped_when_not_optimized():
    query = SearchQuery.parse({"query": "tree permit", "useOptimized": False})
    results = [
        item("vector-only", 0.80, "Boulevard maintenance schedule."),
        item("keyword", 0.75, "A tree permit is required."),
    ]

    assert HybridKeywordStrategy().apply(query, results) == results


def test_score_floor():
    query = SearchQuery.parse({"query": "tree permit", "minScore": 0.6})
    results = [item("hi", 0.6, "x"), item("lo", 0.59, "y")]

    assert [r.id for r in ScoreFloorStrategy().apply(query, results)] == ["hi"]
