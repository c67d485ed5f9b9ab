"""FastAPI routes for the movie, actor and genre catalog."""

import logging
import random
from typing import Any, Awaitable, TypeVar

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from catalog_store import StoreError
from catalog_api.catalog.models import (
    ActorQueryParameters,
    MovieQueryParameters,
    is_actor_id,
    is_movie_id,
    method_text,
    validation_messages,
)
from catalog_api.dependencies import StoreDep

logger = logging.getLogger(__name__)

ACTORS_CONTROLLER_EXCEPTION = "ActorsControllerException"
FEATURED_CONTROLLER_EXCEPTION = "FeaturedControllerException"
GENRES_CONTROLLER_EXCEPTION = "GenresControllerException"
MOVIES_CONTROLLER_EXCEPTION = "MoviesControllerException"

ModelT = TypeVar("ModelT", bound=BaseModel)

router = APIRouter(prefix="/api", tags=["catalog"])


def _parse(model: type[ModelT], request: Request) -> ModelT:
    try:
        return model.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=validation_messages(e))


async def _handle(call: Awaitable[Any], method: str, error_message: str) -> Any:
    """Await a store call, mapping store failures onto HTTP responses."""
    try:
        return await call
    except StoreError as e:
        if e.status_code == 404:
            logger.warning("%s:NotFound:%s", method, e.activity_id)
            raise HTTPException(status_code=404, detail="Not Found")

        logger.error(
            "StoreError:%s:%s:%s:%s", method, e.status_code, e.activity_id, e.message
        )
        return JSONResponse(status_code=500, content={"detail": error_message})
    except Exception:
        logger.exception("Exception:%s", method)
        return JSONResponse(status_code=500, content={"detail": error_message})


@router.get("/genres")
async def get_genres(request: Request, store: StoreDep):
    """List all genre names."""
    method = method_text("getGenres", request.query_params)
    logger.info(method)

    return await _handle(store.get_genres(), method, GENRES_CONTROLLER_EXCEPTION)


@router.get("/movies")
async def get_movies(request: Request, store: StoreDep):
    """Search movies by text, genre, year, rating, actor or top rated."""
    method = method_text("getMovies", request.query_params)
    logger.info(method)

    params = _parse(MovieQueryParameters, request)

    return await _handle(
        store.get_movies_by_query(params.to_query()), method, MOVIES_CONTROLLER_EXCEPTION
    )


@router.get("/movies/{movie_id}")
async def get_movie(movie_id: str, store: StoreDep):
    """Fetch a single movie by id."""
    method = f"getMovieById:{movie_id}"
    logger.info(method)

    if not is_movie_id(movie_id):
        raise HTTPException(status_code=400, detail="Invalid Movie ID parameter")

    return await _handle(store.get_movie(movie_id), method, MOVIES_CONTROLLER_EXCEPTION)


@router.get("/actors")
async def get_actors(request: Request, store: StoreDep):
    """Search actors by name."""
    method = method_text("getActors", request.query_params)
    logger.info(method)

    params = _parse(ActorQueryParameters, request)

    return await _handle(
        store.get_actors_by_query(params.to_query()), method, ACTORS_CONTROLLER_EXCEPTION
    )


@router.get("/actors/{actor_id}")
async def get_actor(actor_id: str, store: StoreDep):
    """Fetch a single actor by id."""
    method = f"getActorById:{actor_id}"
    logger.info(method)

    if not is_actor_id(actor_id):
        raise HTTPException(status_code=400, detail="Invalid Actor ID parameter")

    return await _handle(store.get_actor(actor_id), method, ACTORS_CONTROLLER_EXCEPTION)


@router.get("/featured/movie")
async def get_featured_movie(store: StoreDep):
    """A random movie from the featured list."""
    method = "getFeaturedMovie"
    logger.info(method)

    featured = await _handle(
        store.get_featured_movie_list(), method, FEATURED_CONTROLLER_EXCEPTION
    )
    if isinstance(featured, JSONResponse):
        return featured
    if not featured:
        raise HTTPException(status_code=404, detail="Not Found")

    movie_id = random.choice(featured)

    return await _handle(store.get_movie(movie_id), method, FEATURED_CONTROLLER_EXCEPTION)
