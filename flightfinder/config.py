"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
dataset location, search defaults, map rendering and logging.

Configuration can be overridden via environment variables:
- FF_DATA_DIR=/path/to/data
- FF_SEARCH_DEFAULT_MAX_HOPS=2
- FF_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DataConfig(BaseSettings):
    """Flight dataset configuration.

    Environment variables prefixed with FF_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="FF_DATA_")

    dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    flights_file: str = "flights.csv"
    cities_file: str = "cities.csv"

    @property
    def flights_path(self) -> Path:
        """Full path to flights CSV file."""
        return self.dir / self.flights_file

    @property
    def cities_path(self) -> Path:
        """Full path to cities CSV file."""
        return self.dir / self.cities_file


class SearchConfig(BaseSettings):
    """Defaults for route searches.

    Environment variables prefixed with FF_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="FF_SEARCH_")

    default_max_hops: int = Field(default=3, ge=0)
    default_rank_by: Literal["price", "duration", "hops"] = "price"
    comparison_limit: int = Field(default=4, ge=1)
    comparison_max_hops: int = Field(default=1, ge=0)


class RenderingConfig(BaseSettings):
    """Map rendering configuration.

    Environment variables prefixed with FF_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="FF_MAP_")

    zoom_start: int = 4
    tiles: str = "OpenStreetMap"
    optimal_color: str = "blue"
    alternative_color: str = "gray"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with FF_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="FF_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.search.default_max_hops)
        print(config.data.flights_path)

    Environment variables prefixed with FF_.
    """

    model_config = SettingsConfigDict(env_prefix="FF_")

    data: DataConfig = Field(default_factory=DataConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


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
