"""CatalogStore façade - lifecycle and read access to the catalog indexes."""

import uuid
from types import TracebackType
from typing import Any, Optional, Self

from elasticsearch import ApiError, AsyncElasticsearch

from catalog_store.config import StoreConfig
from catalog_store.core.queries import (
    ActorQuery,
    MovieQuery,
    build_actor_search,
    build_genre_search,
    build_movie_search,
)
from catalog_store.errors import StoreError

FEATURED_DOCUMENT_ID = "featured"


def _store_error(error: ApiError, activity_id: str) -> StoreError:
    return StoreError(
        message=str(error.message),
        status_code=error.status_code,
        activity_id=activity_id,
    )


class CatalogStore:
    """Unified façade over the movie, actor, genre and featured indexes."""

    def __init__(self, config: StoreConfig) -> None:
        self._config = config
        self._elasticsearch: Optional[AsyncElasticsearch] = None

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def elasticsearch(self) -> AsyncElasticsearch:
        """Native Elasticsearch async client."""
        if self._elasticsearch is None:
            raise RuntimeError("CatalogStore not started. Call start() first.")
        return self._elasticsearch

    async def _connect_elasticsearch(self) -> None:
        cfg = self._config
        self._elasticsearch = AsyncElasticsearch(
            hosts=cfg.hosts,
            api_key=cfg.api_key,
            request_timeout=cfg.request_timeout,
        )

    async def _disconnect_elasticsearch(self) -> None:
        if self._elasticsearch:
            await self._elasticsearch.close()
            self._elasticsearch = None

    async def start(self) -> None:
        """Connect to the store."""
        await self._connect_elasticsearch()

    async def stop(self) -> None:
        """Graceful shutdown."""
        await self._disconnect_elasticsearch()

    async def _search(self, index: str, body: dict[str, Any]) -> list[dict[str, Any]]:
        # every request is tagged with an X-Opaque-Id so failures can be correlated
        activity_id = str(uuid.uuid4())
        client = self.elasticsearch.options(opaque_id=activity_id)
        try:
            response = await client.search(index=index, **body)
        except ApiError as e:
            raise _store_error(e, activity_id) from e
        return [hit["_source"] for hit in response["hits"]["hits"]]

    async def _get(self, index: str, doc_id: str) -> dict[str, Any]:
        activity_id = str(uuid.uuid4())
        client = self.elasticsearch.options(opaque_id=activity_id)
        try:
            response = await client.get(index=index, id=doc_id)
        except ApiError as e:
            raise _store_error(e, activity_id) from e
        return response["_source"]

    async def get_genres(self) -> list[str]:
        """List genre names in alphabetical order."""
        docs = await self._search(self._config.genres_index, build_genre_search())
        return [doc["genre"] for doc in docs]

    async def get_movie(self, movie_id: str) -> dict[str, Any]:
        """
        Fetch a single movie.

        Raises:
            StoreError: status 404 when the movie does not exist
        """
        return await self._get(self._config.movies_index, movie_id)

    async def get_actor(self, actor_id: str) -> dict[str, Any]:
        """Fetch a single actor."""
        return await self._get(self._config.actors_index, actor_id)

    async def get_movies_by_query(self, query: MovieQuery) -> list[dict[str, Any]]:
        return await self._search(self._config.movies_index, build_movie_search(query))

    async def get_actors_by_query(self, query: ActorQuery) -> list[dict[str, Any]]:
        return await self._search(self._config.actors_index, build_actor_search(query))

    async def get_featured_movie_list(self) -> list[str]:
        """Movie ids curated as featured; empty when none are configured."""
        try:
            doc = await self._get(self._config.featured_index, FEATURED_DOCUMENT_ID)
        except StoreError as e:
            if e.status_code == 404:
                return []
            raise
        return list(doc.get("movieIds", []))

    async def __aenter__(self) -> Self:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.stop()
