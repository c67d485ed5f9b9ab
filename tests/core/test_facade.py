"""Tests for the CatalogStore façade."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from elasticsearch import ApiError, NotFoundError

from catalog_store.config import StoreConfig
from catalog_store.core.facade import CatalogStore
from catalog_store.core.queries import ActorQuery, MovieQuery
from catalog_store.errors import StoreError


def hits(*sources):
    return {"hits": {"hits": [{"_source": s} for s in sources]}}


@pytest.fixture
def config() -> StoreConfig:
    return StoreConfig(api_key="secret")


@pytest.fixture
def store(config: StoreConfig) -> CatalogStore:
    return CatalogStore(config)


@pytest.fixture
def client(store: CatalogStore) -> MagicMock:
    """The per-request client returned by ``elasticsearch.options``."""
    es = MagicMock()
    request_client = MagicMock()
    request_client.search = AsyncMock(return_value=hits())
    request_client.get = AsyncMock(return_value={"_source": {}})
    es.options.return_value = request_client
    store._elasticsearch = es
    return request_client


def test_not_started_raises(store: CatalogStore):
    with pytest.raises(RuntimeError, match="not started"):
        store.elasticsearch


async def test_start_stop(store: CatalogStore):
    with patch.object(store, "_connect_elasticsearch", new_callable=AsyncMock) as mock_connect:
        await store.start()
        mock_connect.assert_called_once()

    with patch.object(store, "_disconnect_elasticsearch", new_callable=AsyncMock) as mock_disconnect:
        await store.stop()
        mock_disconnect.assert_called_once()


async def test_context_manager(config: StoreConfig):
    with patch.object(CatalogStore, "start", new_callable=AsyncMock) as mock_start, \
         patch.object(CatalogStore, "stop", new_callable=AsyncMock) as mock_stop:

        async with CatalogStore(config) as store:
            assert store is not None

        mock_start.assert_called_once()
        mock_stop.assert_called_once()


async def test_disconnect_closes_client(store: CatalogStore):
    es = MagicMock()
    es.close = AsyncMock()
    store._elasticsearch = es

    await store.stop()

    es.close.assert_awaited_once()
    with pytest.raises(RuntimeError):
        store.elasticsearch


async def test_get_genres(store: CatalogStore, client: MagicMock):
    client.search.return_value = hits({"genre": "Action"}, {"genre": "Comedy"})

    genres = await store.get_genres()

    assert genres == ["Action", "Comedy"]
    assert client.search.call_args.kwargs["index"] == "genres"


async def test_get_movie(store: CatalogStore, client: MagicMock):
    client.get.return_value = {"_source": {"movieId": "tt0133093"}}

    movie = await store.get_movie("tt0133093")

    assert movie == {"movieId": "tt0133093"}
    client.get.assert_awaited_once_with(index="movies", id="tt0133093")


async def test_get_actor(store: CatalogStore, client: MagicMock):
    await store.get_actor("nm0000173")

    client.get.assert_awaited_once_with(index="actors", id="nm0000173")


async def test_movie_search_uses_query_body(store: CatalogStore, client: MagicMock):
    client.search.return_value = hits({"movieId": "tt1"}, {"movieId": "tt2"})

    movies = await store.get_movies_by_query(MovieQuery(q="ring", page_size=2))

    assert [m["movieId"] for m in movies] == ["tt1", "tt2"]
    kwargs = client.search.call_args.kwargs
    assert kwargs["index"] == "movies"
    assert kwargs["size"] == 2
    assert kwargs["from_"] == 0


async def test_actor_search(store: CatalogStore, client: MagicMock):
    await store.get_actors_by_query(ActorQuery(q="nicole"))

    assert client.search.call_args.kwargs["index"] == "actors"


async def test_requests_carry_opaque_id(store: CatalogStore, client: MagicMock):
    await store.get_genres()
    await store.get_genres()

    first, second = store.elasticsearch.options.call_args_list
    assert first.kwargs["opaque_id"]
    assert first.kwargs["opaque_id"] != second.kwargs["opaque_id"]


async def test_not_found_becomes_store_error(store: CatalogStore, client: MagicMock):
    client.get.side_effect = NotFoundError("document missing", meta=MagicMock(status=404), body={})

    with pytest.raises(StoreError) as exc_info:
        await store.get_movie("tt0000001")

    error = exc_info.value
    assert error.status_code == 404
    assert error.message == "document missing"
    assert error.activity_id == store.elasticsearch.options.call_args.kwargs["opaque_id"]
    assert isinstance(error.__cause__, NotFoundError)


async def test_search_failure_becomes_store_error(store: CatalogStore, client: MagicMock):
    client.search.side_effect = ApiError("overloaded", meta=MagicMock(status=503), body={})

    with pytest.raises(StoreError) as exc_info:
        await store.get_movies_by_query(MovieQuery())

    assert exc_info.value.status_code == 503


async def test_featured_movie_list(store: CatalogStore, client: MagicMock):
    client.get.return_value = {"_source": {"movieIds": ["tt0133093", "tt0120737"]}}

    featured = await store.get_featured_movie_list()

    assert featured == ["tt0133093", "tt0120737"]
    client.get.assert_awaited_once_with(index="featured", id="featured")


async def test_featured_movie_list_missing(store: CatalogStore, client: MagicMock):
    client.get.side_effect = NotFoundError("missing", meta=MagicMock(status=404), body={})

    assert await store.get_featured_movie_list() == []


async def test_featured_movie_list_error(store: CatalogStore, client: MagicMock):
    client.get.side_effect = ApiError("denied", meta=MagicMock(status=403), body={})

    with pytest.raises(StoreError):
        await store.get_featured_movie_list()
