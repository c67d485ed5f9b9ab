"""Movie Catalog API - catalog reads and composite health check."""

from catalog_api.app import create_app
from catalog_api.config import VERSION, ApiConfig

__version__ = VERSION

__all__ = ["create_app", "ApiConfig"]
