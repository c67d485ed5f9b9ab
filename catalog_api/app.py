"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog_store import CatalogStore, StoreConfig
from catalog_api.config import ApiConfig
from catalog_api.log_config import configure_logging


def create_app(
    api_config: ApiConfig | None = None,
    store_config: StoreConfig | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    api_config = api_config or ApiConfig()
    configure_logging(api_config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: connect the store
        if store_config:
            store = CatalogStore(store_config)
            await store.start()
            app.state.store = store
        yield
        # Shutdown: disconnect the store
        if hasattr(app.state, "store"):
            await app.state.store.stop()

    app = FastAPI(
        title=api_config.title,
        version=api_config.version,
        lifespan=lifespan,
        debug=api_config.debug,
    )

    app.state.api_config = api_config

    # Register routes
    from catalog_api.catalog.routes import router as catalog_router
    from catalog_api.healthz.routes import router as healthz_router

    app.include_router(catalog_router)
    app.include_router(healthz_router)

    return app
