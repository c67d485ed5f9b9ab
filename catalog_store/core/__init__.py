"""Core components for the catalog store."""

from catalog_store.core.facade import CatalogStore
from catalog_store.core.health import (
    CapturedError,
    HealthReport,
    HealthStatus,
    ProbeResult,
    fold_status,
)
from catalog_store.core.healthcheck import CatalogHealthCheck, HealthCheckConfig
from catalog_store.core.probes import Probe, run_probe
from catalog_store.core.queries import ActorQuery, MovieQuery

__all__ = [
    "CatalogStore",
    "CapturedError",
    "HealthReport",
    "HealthStatus",
    "ProbeResult",
    "fold_status",
    "CatalogHealthCheck",
    "HealthCheckConfig",
    "Probe",
    "run_probe",
    "ActorQuery",
    "MovieQuery",
]
