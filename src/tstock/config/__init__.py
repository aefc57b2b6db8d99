"""Configuration loading: YAML files, environment overrides, pydantic validation."""

from .state import ConfigLoader, ConfigState, HexunSettings, LoggingConfig, get_config

__all__ = [
    "ConfigLoader",
    "ConfigState",
    "HexunSettings",
    "LoggingConfig",
    "get_config",
]
