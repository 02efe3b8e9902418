"""Configuration loader with 3-tier parameter precedence."""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, get_default_config

CONFIG_ENV_VAR = "SEPTEM_CONFIG"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_path: Optional[Path]
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """
        Create a ConfigLoader instance.

        Without an explicit path the SEPTEM_CONFIG environment variable is
        consulted; without either, only defaults apply.
        """
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                config_path = Path(env_path)

        return cls(
            config_path=config_path,
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """
        Load overrides from the YAML file.

        Raises:
            FileNotFoundError: If a config path was given but does not exist
            ValueError: If the file does not hold a mapping
        """
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ValueError(f"Config file must contain a mapping: {self.config_path}")

        return file_config

    def merge_config(self, cli_overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Command line flags (highest priority, None means "not given")
        2. YAML file
        3. Defaults (lowest priority)

        Raises:
            ValueError: On unknown keys or wrongly typed values
        """
        config = self.defaults

        config = self._apply(config, self.load_file_config(), source=str(self.config_path))

        if cli_overrides:
            given = {k: v for k, v in cli_overrides.items() if v is not None}
            config = self._apply(config, given, source="command line")

        return config

    def _apply(self, base: DefaultConfig, overrides: dict[str, Any], source: str) -> DefaultConfig:
        """Apply a flat override mapping onto a config, checking keys and types."""
        known = {f.name: type(getattr(base, f.name)) for f in fields(base)}

        for key, value in overrides.items():
            if key not in known:
                raise ValueError(f"Unknown config key {key!r} in {source}")
            # bool is an int subclass; compare exact types
            if type(value) is not known[key]:
                raise ValueError(
                    f"Config key {key!r} in {source} must be {known[key].__name__}, "
                    f"got {type(value).__name__}"
                )

        return replace(base, **overrides)
