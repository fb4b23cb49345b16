"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the tunable values
of the application: where seed data lives, the fare formula constants
and logging.

Configuration can be overridden via environment variables:
- TRANSPORT_GRAPH_DATA_DIR=/path/to/data
- TRANSPORT_FARE_BASE_RATE_PER_KM=12
- TRANSPORT_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Seed data configuration.

    Environment variables prefixed with TRANSPORT_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TRANSPORT_GRAPH_")

    data_dir: Path = Field(default_factory=Path.cwd)
    cities_file: str = "cities.txt"
    routes_file: str = "routes.txt"

    @property
    def cities_path(self) -> Path:
        """Full path to the cities seed file."""
        return self.data_dir / self.cities_file

    @property
    def routes_path(self) -> Path:
        """Full path to the routes seed file."""
        return self.data_dir / self.routes_file


class FareConfig(BaseSettings):
    """Fare formula constants.

    fare = distance * base_rate_per_km
           + (source population + destination population) // population_unit

    Environment variables prefixed with TRANSPORT_FARE_.
    """

    model_config = SettingsConfigDict(env_prefix="TRANSPORT_FARE_")

    base_rate_per_km: int = 10
    population_unit: int = 1_000_000


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TRANSPORT_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRANSPORT_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.cities_path)
        print(config.fare.base_rate_per_km)

    Environment variables prefixed with TRANSPORT_.
    """

    model_config = SettingsConfigDict(env_prefix="TRANSPORT_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    fare: FareConfig = Field(default_factory=FareConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
