"""FastAPI dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from catalog_store import CatalogHealthCheck, CatalogStore, HealthCheckConfig
from catalog_api.config import ApiConfig


async def get_store(request: Request) -> CatalogStore:
    """Get the CatalogStore instance from app state."""
    return request.app.state.store


def build_health_check(request: Request) -> CatalogHealthCheck:
    """Create a health check bound to the app's store and environment."""
    store: CatalogStore = request.app.state.store
    api_config: ApiConfig = request.app.state.api_config

    return CatalogHealthCheck(
        store,
        HealthCheckConfig(
            version=api_config.version,
            store_key=store.config.api_key,
            instance_id=api_config.instance_id,
        ),
    )


StoreDep = Annotated[CatalogStore, Depends(get_store)]
