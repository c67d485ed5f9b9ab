"""Pytest configuration and shared fixtures."""

from typing import Callable, Iterable
from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog_store import CatalogStore, StoreConfig


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


def scripted_clock(durations_ms: Iterable[int]) -> Callable[[], int]:
    """Nanosecond clock where each consecutive pair of reads spans one duration."""
    ticks = []
    now = 0
    for duration in durations_ms:
        ticks.append(now)
        now += duration * 1_000_000
        ticks.append(now)
    it = iter(ticks)
    return lambda: next(it)


@pytest.fixture
def fake_store() -> MagicMock:
    """CatalogStore stand-in answering every read instantly."""
    store = MagicMock(spec=CatalogStore)
    store.config = StoreConfig(api_key="abcdefghij")
    store.get_genres = AsyncMock(return_value=["Action", "Comedy", "Drama"])
    store.get_movie = AsyncMock(
        return_value={"movieId": "tt0133093", "title": "The Matrix", "year": 1999}
    )
    store.get_actor = AsyncMock(
        return_value={"actorId": "nm0000173", "name": "Nicole Kidman"}
    )
    store.get_movies_by_query = AsyncMock(
        return_value=[{"movieId": "tt0120737", "title": "The Lord of the Rings"}]
    )
    store.get_actors_by_query = AsyncMock(
        return_value=[{"actorId": "nm0000173", "name": "Nicole Kidman"}]
    )
    store.get_featured_movie_list = AsyncMock(return_value=["tt0133093"])
    return store


@pytest.fixture
def clock() -> Callable[[Iterable[int]], Callable[[], int]]:
    """Factory for scripted probe clocks, one duration (ms) per probe."""
    return scripted_clock
