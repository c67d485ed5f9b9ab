"""Elasticsearch-backed movie catalog store with a composite health check."""

from catalog_store.config import StoreConfig
from catalog_store.core import (
    ActorQuery,
    CapturedError,
    CatalogHealthCheck,
    CatalogStore,
    HealthCheckConfig,
    HealthReport,
    HealthStatus,
    MovieQuery,
    Probe,
    ProbeResult,
    fold_status,
    run_probe,
)
from catalog_store.errors import StoreError

__all__ = [
    # Façade
    "CatalogStore",
    # Config
    "StoreConfig",
    # Queries
    "MovieQuery",
    "ActorQuery",
    # Errors
    "StoreError",
    # Health
    "HealthStatus",
    "ProbeResult",
    "CapturedError",
    "HealthReport",
    "fold_status",
    "Probe",
    "run_probe",
    "CatalogHealthCheck",
    "HealthCheckConfig",
]
