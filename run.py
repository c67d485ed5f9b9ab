#!/usr/bin/env python3
"""Development server for the catalog API."""

import uvicorn

from catalog_api import create_app
from catalog_api.config import ApiConfig
from catalog_store import StoreConfig

if __name__ == "__main__":
    # Create app with debug mode
    api_config = ApiConfig.from_env()
    api_config.debug = True
    app = create_app(
        api_config=api_config,
        store_config=StoreConfig.from_env(),
    )

    # Run development server
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        reload=False,  # Set to True for auto-reload during development
        log_level="info",
    )
