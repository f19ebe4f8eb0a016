"""Configuration management for the resolver."""
from __future__ import annotations

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from vpc_resolver.config.env_expansion import expand_config_env_vars
from vpc_resolver.config.schemas import AppConfig
from vpc_resolver.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "VPC_RESOLVER_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    "aws": {
        "region": "${AWS_REGION:us-east-1}",
        "profile": "${AWS_PROFILE:}",
        "endpoint_url": "${AWS_ENDPOINT_URL:}",
        "max_attempts": 3,
        "connect_timeout_ms": 10000,
    },
    "logging": {
        "level": "${VPC_RESOLVER_LOG_LEVEL:INFO}",
        "destination": "stdout",
        "file_path": "logs/vpc_resolver.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },
}

# Environment variables that win over values read from a config file
ENVIRONMENT_OVERRIDES = {
    "AWS_REGION": ("aws", "region"),
    "AWS_PROFILE": ("aws", "profile"),
    "AWS_ENDPOINT_URL": ("aws", "endpoint_url"),
    "VPC_RESOLVER_LOG_LEVEL": ("logging", "level"),
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigurationManager:
    """
    Loads and validates the application configuration.

    Sources, lowest precedence first:
    - built-in defaults
    - a JSON or YAML file (explicit path, or ``$VPC_RESOLVER_CONFIG``)
    - environment overrides (``AWS_REGION``, ``AWS_PROFILE``,
      ``AWS_ENDPOINT_URL``, ``VPC_RESOLVER_LOG_LEVEL``)

    The configuration is loaded lazily on first access.
    """

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def reload(self) -> None:
        """Drop the loaded configuration so the next access reads it again."""
        with self._lock:
            self._app_config = None

    def _load_app_config(self) -> AppConfig:
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            config_data = _deep_merge(config_data, self.load_from_file(self._config_file))

        config_data = self.apply_environment_overrides(expand_config_env_vars(config_data))

        try:
            return AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {str(e)}", details=e.errors())

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """
        Load a configuration file.

        Args:
            path: Path to a ``.json``, ``.yaml`` or ``.yml`` file

        Returns:
            Parsed configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")

        logger.debug("Loading configuration from %s", path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.endswith((".yaml", ".yml")):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {str(e)}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides on top of loaded configuration."""
        for env_var, (section, key) in ENVIRONMENT_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value:
                config_data.setdefault(section, {})[key] = value
        return config_data
