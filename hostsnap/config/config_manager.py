"""Configuration loading and management."""
from typing import Optional

import yaml

from .config import Config
from .display_config import DisplayConfig
from .collection_config import CollectionConfig


class ConfigError(Exception):
    """Configuration file could not be read or parsed."""


class ConfigManager:
    """Configuration loading and management."""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Config:
        """Load configuration from a YAML file, or built-in defaults when no path is given."""
        if config_path is None:
            return Config()

        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"cannot read config file {config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {config_path}: {e}") from e

        return ConfigManager.parse_config(config_data or {})

    @staticmethod
    def parse_config(config_data: dict) -> Config:
        """Build a Config from already-parsed YAML data."""
        if not isinstance(config_data, dict):
            raise ConfigError("config root must be a mapping")

        unknown = set(config_data) - {'display', 'collection'}
        if unknown:
            raise ConfigError(f"unknown config sections: {', '.join(sorted(unknown))}")

        try:
            display = DisplayConfig(**(config_data.get('display') or {}))
            collection = CollectionConfig(**(config_data.get('collection') or {}))
        except TypeError as e:
            # Unknown keys or wrongly typed values inside a section
            raise ConfigError(f"invalid config: {e}") from e

        return Config(display=display, collection=collection)
