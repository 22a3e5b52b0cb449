"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- EMS_NETWORK_DATA_DIR=/path/to/data
- EMS_NETWORK_DEFAULT_SEARCH_RADIUS_KM=5
- EMS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Station network data configuration.

    Environment variables prefixed with EMS_NETWORK_. No data files ship
    with the package: ``data_dir`` defaults to ``<project root>/data`` and
    deployments point EMS_NETWORK_DATA_DIR at the directory holding
    ``stations.csv`` and ``connections.csv``.
    """

    model_config = SettingsConfigDict(env_prefix="EMS_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    stations_file: str = "stations.csv"
    connections_file: str = "connections.csv"
    default_search_radius_km: float = Field(default=3.0, ge=0)

    @property
    def stations_path(self) -> Path:
        """Full path to stations CSV file."""
        return self.data_dir / self.stations_file

    @property
    def connections_path(self) -> Path:
        """Full path to connections CSV file."""
        return self.data_dir / self.connections_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with EMS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="EMS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.network.stations_path)
        print(config.observability.level)

    Environment variables prefixed with EMS_.
    """

    model_config = SettingsConfigDict(env_prefix="EMS_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
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
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
