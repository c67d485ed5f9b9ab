"""Configuration dataclasses for the catalog store."""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class StoreConfig:
    """Elasticsearch connection and index configuration."""

    hosts: list[str] = field(default_factory=lambda: ["http://localhost:9200"])
    api_key: Optional[str] = None
    movies_index: str = "movies"
    actors_index: str = "actors"
    genres_index: str = "genres"
    featured_index: str = "featured"
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Build a config from ELASTICSEARCH_* environment variables."""
        config = cls()
        hosts = os.getenv("ELASTICSEARCH_HOSTS")
        if hosts:
            config.hosts = [h.strip() for h in hosts.split(",") if h.strip()]
        config.api_key = os.getenv("ELASTICSEARCH_API_KEY") or None
        return config
