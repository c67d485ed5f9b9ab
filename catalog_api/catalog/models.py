"""Pydantic models for catalog query parameters."""

import re
from datetime import datetime, timezone
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from catalog_store import ActorQuery, MovieQuery

START_YEAR = 1874

MOVIE_ID_PATTERN = re.compile(r"^tt\d{5,9}$")
ACTOR_ID_PATTERN = re.compile(r"^nm\d{5,9}$")


def end_year() -> int:
    return datetime.now(timezone.utc).year + 5


def is_movie_id(value: str) -> bool:
    return bool(MOVIE_ID_PATTERN.match(value))


def is_actor_id(value: str) -> bool:
    return bool(ACTOR_ID_PATTERN.match(value))


def method_text(method: str, query_params: Mapping[str, str]) -> str:
    """
    Log label for a request, e.g. ``getMovies:q:ring``.

    Args:
        method: Handler name
        query_params: Query parameters as received
    """
    return method + "".join(f":{key}:{value}" for key, value in query_params.items())


def validation_messages(error: ValidationError) -> list[str]:
    messages = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"])
        messages.append(f"{field}: {err['msg']}")
    return messages


class SearchParameters(BaseModel):
    """Text search and paging shared by the list endpoints."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    q: Optional[str] = Field(None, min_length=2, max_length=20)
    page_number: int = Field(1, ge=1, le=10000, alias="pageNumber")
    page_size: int = Field(100, ge=1, le=1000, alias="pageSize")


class ActorQueryParameters(SearchParameters):
    """Query string of GET /api/actors."""

    def to_query(self) -> ActorQuery:
        return ActorQuery(
            q=self.q,
            page_number=self.page_number,
            page_size=self.page_size,
        )


class MovieQueryParameters(SearchParameters):
    """Query string of GET /api/movies."""

    genre: Optional[str] = Field(None, min_length=3, max_length=20)
    year: int = 0
    rating: float = Field(0, ge=0, le=10)
    actor_id: Optional[str] = Field(None, alias="actorId", pattern=r"^nm\d{5,9}$")
    top_rated: bool = Field(False, alias="toprated")

    @field_validator("year")
    @classmethod
    def validate_year(cls, value: int) -> int:
        # 0 means "any year"
        if value != 0 and not START_YEAR <= value <= end_year():
            raise ValueError(
                f"The parameter 'year' should be between {START_YEAR} and {end_year()}."
            )
        return value

    def to_query(self) -> MovieQuery:
        return MovieQuery(
            q=self.q,
            genre=self.genre,
            year=self.year,
            rating=self.rating,
            actor_id=self.actor_id,
            top_rated=self.top_rated,
            page_number=self.page_number,
            page_size=self.page_size,
        )
