"""
Configuration Module

YAML configuration with built-in defaults and environment variable overrides.
"""

import copy
import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'configs/config.yaml'

DEFAULTS: Dict[str, Any] = {
    'logging': {
        'level': 'INFO',
        'file': None,
        'format': None,
    },
    'filters': {
        'default_sort': None,
    },
    'api': {
        'host': '0.0.0.0',
        'port': 8000,
    },
}


class Config:
    """
    Configuration manager for the application.

    Values from the YAML file are layered over DEFAULTS; an environment
    variable named after the upper-cased key path wins over both
    (``filters.default_sort`` -> ``FILTERS_DEFAULT_SORT``).

    Example:
        config = Config.from_yaml('configs/config.yaml')
        sort_by = config.get('filters.default_sort')
    """

    def __init__(self, config_dict: Dict[str, Any] = None):
        self._config = _merge(DEFAULTS, config_dict or {})

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'Config':
        """Load configuration from YAML file, falling back to defaults."""
        path = Path(path)

        if not path.exists():
            logger.warning(f"Config file not found: {path}, using defaults")
            return cls({})

        with open(path, 'r', encoding='utf-8') as f:
            config_dict = yaml.safe_load(f) or {}

        if not isinstance(config_dict, dict):
            raise ValueError(f"Config file {path} must contain a top-level mapping")

        logger.info(f"Loaded configuration from {path}")
        return cls(config_dict)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value with dot notation support.

        Args:
            key: Dot-separated key path (e.g., 'api.port')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_value = os.environ.get(key.upper().replace('.', '_'))
        if env_value is not None:
            return env_value

        value = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return default if value is None else value

    def get_int(self, key: str, default: int = 0) -> int:
        """Get a value as int; environment overrides arrive as strings."""
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Config value {key}={value!r} is not an integer, using {default}")
            return default

    def get_section(self, section: str) -> Dict:
        """Get entire configuration section."""
        value = self.get(section, {})
        return value if isinstance(value, dict) else {}

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


# Global config instance
_global_config: Optional[Config] = None


def get_config(config_path: str = None) -> Config:
    """Get or create global configuration. ``REVIEW_FILTER_CONFIG`` overrides the path."""
    global _global_config
    if _global_config is None:
        path = config_path or os.environ.get('REVIEW_FILTER_CONFIG', DEFAULT_CONFIG_PATH)
        _global_config = Config.from_yaml(path)
    return _global_config


def reset_config():
    """Drop the cached global configuration."""
    global _global_config
    _global_config = None


def get_filter_config() -> Dict:
    """Get filter defaults."""
    return get_config().get_section('filters')


def get_api_config() -> Dict:
    """Get API server settings."""
    return get_config().get_section('api')
