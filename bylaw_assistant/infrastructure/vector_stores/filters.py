from typing import Any, Optional

from bylaw_assistant.core.models.search import SearchFilters


def build_metadata_filter(filters: Optional[SearchFilters]) -> Optional[dict[str, Any]]:
    """Translate search filters into a Mongo-style metadata filter.

    Both Pinecone and Chroma accept `$eq`/`$gte`/`$lte` conditions joined
    with `$and`. Returns None when no filter applies.
    """
    if filters is None:
        return None

    conditions: list[dict[str, Any]] = []

    if filters.category:
        conditions.append({"category": {"$eq": filters.category}})
    if filters.bylaw_number:
        conditions.append({"bylawNumber": {"$eq": filters.bylaw_number}})
    if filters.date_from:
        conditions.append({"dateEnacted": {"$gte": filters.date_from}})
    if filters.date_to:
        conditions.append({"dateEnacted": {"$lte": filters.date_to}})

    if not conditions:
        return None
    if len(conditions) == 1:
        return conditions[0]
    return {"$and": conditions}
