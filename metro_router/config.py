"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
data file locations, the path-finding strategy and logging.

Configuration can be overridden via environment variables:
- METRO_GRAPH_DATA_DIR=/path/to/data
- METRO_GRAPH_EDGES_FILE=rebra.txt
- METRO_SOLVER_STRATEGY=heap
- METRO_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with METRO_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    stations_file: str = "stations.txt"
    edges_file: str = "edges.txt"

    @property
    def stations_path(self) -> Path:
        """Full path to the station list."""
        return self.data_dir / self.stations_file

    @property
    def edges_path(self) -> Path:
        """Full path to the edge list."""
        return self.data_dir / self.edges_file


class SolverConfig(BaseSettings):
    """Shortest-path solver configuration.

    Environment variables prefixed with METRO_SOLVER_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_SOLVER_")

    strategy: Literal["dense", "heap"] = "dense"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with METRO_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_LOG_")

    level: str = "INFO"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.stations_path)
        print(config.solver.strategy)

    Environment variables prefixed with METRO_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)
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
