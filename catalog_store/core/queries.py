"""Query builders translating catalog filters into Elasticsearch DSL."""

import re
from dataclasses import dataclass
from typing import Any, Optional

TOP_RATED_COUNT = 10


@dataclass(frozen=True)
class MovieQuery:
    """Filters for a movie search. Zero / None means "not filtered"."""

    q: Optional[str] = None
    genre: Optional[str] = None
    year: int = 0
    rating: float = 0.0
    actor_id: Optional[str] = None
    top_rated: bool = False
    page_number: int = 1
    page_size: int = 100


@dataclass(frozen=True)
class ActorQuery:
    """Filters for an actor search."""

    q: Optional[str] = None
    page_number: int = 1
    page_size: int = 100


def _paging(page_number: int, page_size: int) -> dict[str, int]:
    return {"from_": (page_number - 1) * page_size, "size": page_size}


def escape_wildcard(text: str) -> str:
    """Escape the characters a wildcard pattern treats specially."""
    return re.sub(r"([\\*?])", r"\\\1", text)


def _contains(field: str, text: str) -> dict[str, Any]:
    # textSearch is stored lower-cased, so substring matches are case-insensitive
    return {"wildcard": {field: {"value": f"*{escape_wildcard(text.lower())}*"}}}


def _bool_filter(filters: list[dict[str, Any]]) -> dict[str, Any]:
    if not filters:
        return {"match_all": {}}
    return {"bool": {"filter": filters}}


def build_movie_search(query: MovieQuery) -> dict[str, Any]:
    """
    Build the search request body for a movie query.

    Args:
        query: Movie filters

    Returns:
        Keyword arguments for ``AsyncElasticsearch.search``
    """
    if query.top_rated:
        return {
            "query": {"match_all": {}},
            "sort": [{"rating": "desc"}, {"movieId": "asc"}],
            "from_": 0,
            "size": TOP_RATED_COUNT,
        }

    filters: list[dict[str, Any]] = []

    if query.q:
        filters.append(_contains("textSearch", query.q))
    if query.genre:
        filters.append({"match": {"genres": {"query": query.genre}}})
    if query.year > 0:
        filters.append({"term": {"year": query.year}})
    if query.rating > 0:
        filters.append({"range": {"rating": {"gte": query.rating}}})
    if query.actor_id:
        filters.append({"term": {"roles.actorId": query.actor_id.lower()}})

    return {
        "query": _bool_filter(filters),
        "sort": [{"textSearch": "asc"}, {"movieId": "asc"}],
        **_paging(query.page_number, query.page_size),
    }


def build_actor_search(query: ActorQuery) -> dict[str, Any]:
    """Build the search request body for an actor query."""
    filters = [_contains("textSearch", query.q)] if query.q else []

    return {
        "query": _bool_filter(filters),
        "sort": [{"textSearch": "asc"}, {"actorId": "asc"}],
        **_paging(query.page_number, query.page_size),
    }


def build_genre_search(size: int = 100) -> dict[str, Any]:
    """Build the search request body listing all genres."""
    return {
        "query": {"match_all": {}},
        "sort": [{"genre": "asc"}],
        "from_": 0,
        "size": size,
    }
