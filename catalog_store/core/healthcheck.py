"""Composite health check running representative queries against the store."""

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from catalog_store.core.facade import CatalogStore
from catalog_store.core.health import (
    CapturedError,
    HealthReport,
    HealthStatus,
    fold_status,
)
from catalog_store.core.probes import Clock, Probe, run_probe
from catalog_store.core.queries import ActorQuery, MovieQuery
from catalog_store.errors import StoreError

logger = logging.getLogger(__name__)

DESCRIPTION = "Elasticsearch Health Check"

SENTINEL_MOVIE_ID = "tt0133093"
SENTINEL_ACTOR_ID = "nm0000173"
SENTINEL_MOVIE_QUERY = "ring"
SENTINEL_ACTOR_QUERY = "nicole"

LIST_THRESHOLD_MS = 200
LOOKUP_THRESHOLD_MS = 100


@dataclass(frozen=True)
class HealthCheckConfig:
    """Read-only environment metadata reported with every run."""

    version: str
    store_key: Optional[str] = None
    instance_id: str = "unknown"


def redact_key(key: Optional[str]) -> Optional[str]:
    """Keep the first five characters of an access key."""
    if key is None:
        return None
    return key.ljust(5)[:5].strip() + "..."


def root_cause(error: BaseException) -> BaseException:
    """Unwrap exception groups and explicit causes down to the innermost error."""
    while True:
        if isinstance(error, BaseExceptionGroup) and error.exceptions:
            error = error.exceptions[0]
        elif error.__cause__ is not None:
            error = error.__cause__
        else:
            return error


def default_probes(store: CatalogStore) -> list[Probe]:
    """The fixed probe battery, in run order."""
    return [
        Probe(
            name="getGenres",
            uri="/api/genres",
            threshold_ms=LIST_THRESHOLD_MS,
            call=store.get_genres,
        ),
        Probe(
            name="getMovieById",
            uri=f"/api/movies/{SENTINEL_MOVIE_ID}",
            threshold_ms=LOOKUP_THRESHOLD_MS,
            call=lambda: store.get_movie(SENTINEL_MOVIE_ID),
        ),
        Probe(
            name="getActorById",
            uri=f"/api/actors/{SENTINEL_ACTOR_ID}",
            threshold_ms=LOOKUP_THRESHOLD_MS,
            call=lambda: store.get_actor(SENTINEL_ACTOR_ID),
        ),
        Probe(
            name="searchMovies",
            uri=f"/api/movies?q={SENTINEL_MOVIE_QUERY}",
            threshold_ms=LOOKUP_THRESHOLD_MS,
            call=lambda: store.get_movies_by_query(MovieQuery(q=SENTINEL_MOVIE_QUERY)),
        ),
        Probe(
            name="searchActors",
            uri=f"/api/actors?q={SENTINEL_ACTOR_QUERY}",
            threshold_ms=LOOKUP_THRESHOLD_MS,
            call=lambda: store.get_actors_by_query(ActorQuery(q=SENTINEL_ACTOR_QUERY)),
        ),
        Probe(
            name="getTopRatedMovies",
            uri="/api/movies?toprated=true",
            threshold_ms=LOOKUP_THRESHOLD_MS,
            call=lambda: store.get_movies_by_query(MovieQuery(top_rated=True)),
        ),
    ]


class CatalogHealthCheck:
    """Runs the probe battery and folds the results into one HealthReport."""

    def __init__(
        self,
        store: CatalogStore,
        config: HealthCheckConfig,
        probes: Optional[Sequence[Probe]] = None,
        clock: Clock = time.perf_counter_ns,
    ) -> None:
        self._config = config
        self._probes = list(probes) if probes is not None else default_probes(store)
        self._clock = clock

    @property
    def probes(self) -> list[Probe]:
        return list(self._probes)

    def _unhealthy(self, data: dict[str, Any], error: BaseException) -> HealthReport:
        return HealthReport(
            status=HealthStatus.UNHEALTHY,
            description=DESCRIPTION,
            data=data,
            exception=CapturedError.from_exception(error),
        )

    async def run(self) -> HealthReport:
        """
        Run every probe in order.

        Store failures and any other exception raised while probing are
        recorded in the report, which is then Unhealthy. Cancellation
        propagates.
        """
        data: dict[str, Any] = {}

        try:
            data["storeKey"] = redact_key(self._config.store_key)
            data["instance"] = self._config.instance_id
            data["version"] = self._config.version

            for probe in self._probes:
                data[probe.name] = await run_probe(probe, clock=self._clock)

            return HealthReport(
                status=fold_status(data.values()),
                description=DESCRIPTION,
                data=data,
            )

        except StoreError as e:
            logger.error(
                "StoreError:Healthz:%s:%s:%s", e.status_code, e.activity_id, e.message
            )
            data["storeError"] = e.message
            return self._unhealthy(data, e)

        except ExceptionGroup as eg:
            root = root_cause(eg)
            logger.error(
                "ExceptionGroup:Healthz:%s:%s", type(root).__name__, root
            )
            data["exceptionGroup"] = str(root)
            return self._unhealthy(data, root)

        except Exception as e:
            logger.exception("Exception:Healthz")
            data["exception"] = str(e)
            return self._unhealthy(data, e)
