"""Configuration for the septem CLI."""

from .defaults import DefaultConfig, get_default_config
from .loader import CONFIG_ENV_VAR, ConfigLoader

__all__ = ["DefaultConfig", "get_default_config", "ConfigLoader", "CONFIG_ENV_VAR"]
