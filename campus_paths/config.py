"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for where the map data lives
and how the application logs.

Configuration can be overridden via environment variables:
- CP_GRAPH_DATA_DIR=/path/to/data
- CP_GRAPH_LOCATIONS_FILE=buildings.tsv
- CP_LOG_LEVEL=DEBUG
- CP_LOG_STRUCTURED=true
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Map data configuration.

    Environment variables prefixed with CP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CP_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    locations_file: str = "campus_buildings.tsv"
    segments_file: str = "campus_paths.tsv"

    @property
    def locations_path(self) -> Path:
        """Full path to the locations TSV file."""
        return self.data_dir / self.locations_file

    @property
    def segments_path(self) -> Path:
        """Full path to the segments TSV file."""
        return self.data_dir / self.segments_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.locations_path)
        print(config.observability.level)

    Environment variables prefixed with CP_.
    """

    model_config = SettingsConfigDict(env_prefix="CP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
