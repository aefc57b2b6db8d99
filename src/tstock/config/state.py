"""
Unified configuration state for tstock.

Single source of truth for application configuration: YAML files from a
config directory, environment overrides, pydantic validation and defaults.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from tstock.ingestion.config.value_objects import (
    DEFAULT_BASE_HOST,
    DEFAULT_CALLBACK,
    DEFAULT_COLUMNS,
    HexunConfig,
)

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class HexunSettings(BaseModel):
    """Hexun quote provider configuration."""

    model_config = ConfigDict(extra="allow")

    base_host: str = Field(default=DEFAULT_BASE_HOST, min_length=1)
    column: str = Field(default=DEFAULT_COLUMNS, min_length=1)
    callback: str = Field(default=DEFAULT_CALLBACK, min_length=1)

    @field_validator("base_host")
    @classmethod
    def validate_base_host(cls, v: str) -> str:
        """Host only: scheme and path are added by the request builder."""
        if "://" in v or "/" in v:
            raise ValueError("base_host must be a bare host name")
        return v

    def to_value_object(self) -> HexunConfig:
        return HexunConfig(
            base_host=self.base_host,
            column=self.column,
            callback=self.callback,
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="allow")

    level: str = Field(default="WARNING")
    json_logs: bool = Field(default=False)
    include_timestamp: bool = Field(default=True)


class ConfigState(BaseModel):
    """Root configuration state."""

    model_config = ConfigDict(extra="allow")

    hexun: HexunSettings = Field(default_factory=HexunSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    env: str = Field(default="dev")
    config_dir: str = Field(default="./config")


# =============================================================================
# CONFIG LOADER
# =============================================================================


class ConfigLoader:
    """
    Load and validate configuration from YAML files.

    Merges, later wins:
      1. Defaults on the pydantic models
      2. hexun.yaml and logging.yaml from config_dir
      3. env/<TSTOCK_ENV>.yaml
      4. Environment variable overrides
    """

    def __init__(self, config_dir: str | Path = "./config"):
        self.config_dir = Path(config_dir)
        self._yaml_cache: dict[Path, Any] = {}
        self.env = os.getenv("TSTOCK_ENV", "dev")

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML file with caching."""
        if path in self._yaml_cache:
            return self._yaml_cache[path]

        if not path.exists():
            logger.debug(f"Config file not found (using defaults): {path}")
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load {path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Ignoring {path}: top level must be a mapping")
            return {}

        self._yaml_cache[path] = data
        logger.debug(f"Loaded config: {path}")
        return data

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config."""
        if base_host := os.getenv("HEXUN_BASE_HOST"):
            config.setdefault("hexun", {})["base_host"] = base_host

        if log_level := os.getenv("LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level

        if json_logs := os.getenv("LOG_JSON"):
            config.setdefault("logging", {})["json_logs"] = (
                json_logs.strip().lower() in _TRUTHY
            )

        return config

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        """Deep merge override into base dict."""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    def load(self) -> ConfigState:
        """
        Load complete configuration state.

        Raises:
            pydantic.ValidationError: If configuration is invalid
        """
        logger.info(f"Loading configuration from {self.config_dir} (env: {self.env})")

        config: dict[str, Any] = {}

        for config_file in ["hexun.yaml", "logging.yaml"]:
            file_config = self._load_yaml(self.config_dir / config_file)
            config = self._merge_dicts(config, file_config)

        env_config = self._load_yaml(self.config_dir / "env" / f"{self.env}.yaml")
        config = self._merge_dicts(config, env_config)

        config = self._apply_env_overrides(config)

        try:
            state = ConfigState(env=self.env, config_dir=str(self.config_dir), **config)
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

        logger.info(
            f"Configuration loaded: hexun_host={state.hexun.base_host} "
            f"log_level={state.logging.level}"
        )
        return state


def get_config(config_dir: str | Path | None = None) -> ConfigState:
    """
    Load and return the configuration state.

    Args:
        config_dir: Override config directory. Defaults to $TSTOCK_CONFIG_DIR,
            then ./config. A missing directory yields pure defaults.
    """
    if config_dir is None:
        config_dir = os.getenv("TSTOCK_CONFIG_DIR", "./config")
        if not Path(config_dir).exists():
            logger.debug(f"Config directory not found at {config_dir}, using defaults")

    loader = ConfigLoader(config_dir=config_dir)
    return loader.load()


__all__ = [
    "ConfigLoader",
    "ConfigState",
    "HexunSettings",
    "LoggingConfig",
    "get_config",
]
