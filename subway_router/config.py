"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
dataset location, great-circle radius, station-name matching, map
rendering and logging.

Configuration can be overridden via environment variables:
- SUBWAY_DATA_DATA_DIR=/path/to/data
- SUBWAY_DATA_STATIONS_FILE=seoul.json
- SUBWAY_RESOLVER_MIN_SIMILARITY_SCORE=90
- SUBWAY_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Tuple

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError

# Earth's circumference taken as 40000 km.
DEFAULT_EARTH_RADIUS_KM = 40000.0 / (2.0 * math.pi)


class DatasetConfig(BaseSettings):
    """Station dataset configuration.

    Environment variables prefixed with SUBWAY_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    stations_file: str = "stations.json"
    earth_radius_km: float = Field(default=DEFAULT_EARTH_RADIUS_KM, gt=0)

    @property
    def stations_path(self) -> Path:
        """Full path to the stations JSON file."""
        return self.data_dir / self.stations_file


class ResolverConfig(BaseSettings):
    """Station lookup configuration.

    Environment variables prefixed with SUBWAY_RESOLVER_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_RESOLVER_")

    fuzzy_matching: bool = True
    min_similarity_score: float = Field(default=80.0, ge=0, le=100)


class RenderingConfig(BaseSettings):
    """Route map configuration.

    Environment variables prefixed with SUBWAY_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_MAP_")

    zoom_start: int = 12
    line_color: str = "blue"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SUBWAY_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    This is the main entry point for configuration. Sub-configurations
    can be accessed via attributes:

        config = get_config()
        print(config.dataset.stations_path)
        print(config.resolver.min_similarity_score)

    Environment variables prefixed with SUBWAY_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_")

    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
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

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        error = e.errors()[0]
        setting = _env_name(e.title, error["loc"])
        raise ConfigurationError(
            f"Invalid setting {setting}",
            setting_name=setting,
            expected_type=error["msg"],
            cause=e,
        )


def _env_name(model_name: str, loc: Tuple[Any, ...]) -> str:
    settings = {
        cls.__name__: cls
        for cls in (DatasetConfig, ResolverConfig, RenderingConfig, ObservabilityConfig, AppConfig)
    }
    model = settings.get(model_name)
    prefix = model.model_config.get("env_prefix", "") if model is not None else ""
    return prefix + "_".join(str(part) for part in loc).upper()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
