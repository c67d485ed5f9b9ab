"""API configuration."""

import os
from dataclasses import dataclass

VERSION = "0.1.0"


@dataclass
class ApiConfig:
    """Configuration for the web application."""

    title: str = "Movie Catalog API"
    debug: bool = False
    version: str = VERSION
    instance_id: str = "unknown"
    service_id: str = "moviecatalog"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ApiConfig":
        return cls(
            instance_id=os.getenv("INSTANCE_ID") or "unknown",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
