"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
input source, routing rules, output formatting and logging.

Configuration can be overridden via environment variables:
- ROADTRIP_INPUT_PATH=/path/to/roadmap.txt
- ROADTRIP_ROUTING_REQUIRE_STRONGLY_CONNECTED=false
- ROADTRIP_OUTPUT_PRECISION=3
- ROADTRIP_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InputConfig(BaseSettings):
    """Road-map input configuration.

    Environment variables prefixed with ROADTRIP_INPUT_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADTRIP_INPUT_")

    path: Optional[Path] = None
    encoding: str = "utf-8"
    comment_prefix: str = Field(default="#", min_length=1)


class RoutingConfig(BaseSettings):
    """Routing configuration.

    Environment variables prefixed with ROADTRIP_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADTRIP_ROUTING_")

    require_strongly_connected: bool = True


class OutputConfig(BaseSettings):
    """Route report formatting.

    Environment variables prefixed with ROADTRIP_OUTPUT_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADTRIP_OUTPUT_")

    precision: int = Field(default=2, ge=0, le=6)
    indent: str = "  "


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ROADTRIP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADTRIP_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.input.path)
        print(config.output.precision)

    Environment variables prefixed with ROADTRIP_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADTRIP_")

    input: InputConfig = Field(default_factory=InputConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
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
