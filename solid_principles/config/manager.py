"""Configuration management for the examples."""

import copy
import json
import logging
import os
import re
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError

from solid_principles.config.defaults import DEFAULT_CONFIG
from solid_principles.config.schemas import AppConfig, LoggingConfig, NotificationConfig, PaymentConfig
from solid_principles.domain.base.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "SOLID_CONFIG_FILE"

# Environment variables that always win over file values
ENV_OVERRIDES = {
    "SOLID_LOG_LEVEL": ("logging", "level"),
    "SOLID_LOG_DESTINATION": ("logging", "destination"),
    "SOLID_NOTIFICATION_CHANNEL": ("notification", "channel"),
    "SOLID_PAYMENT_TYPE": ("payment", "default_type"),
}

_PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}")


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration overrides from a JSON or YAML file
    - Applying environment variable overrides
    - Variable interpolation
    - Validation into typed pydantic models
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to configuration file. If not provided,
                        SOLID_CONFIG_FILE is used when set.
        """
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._app_config: Optional[AppConfig] = None

        if self._config_file:
            self._load_config_file(self._config_file)

        self._load_env_vars()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if config_path.lower().endswith((".yaml", ".yml")):
                    user_config = yaml.safe_load(f) or {}
                else:
                    user_config = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e

        if not isinstance(user_config, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")

        self.update_config(user_config)
        logger.debug("Loaded configuration file %s", config_path)

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        for env_var, path in ENV_OVERRIDES.items():
            if env_var in os.environ:
                self._set_nested_value(self._config, path, os.environ[env_var])

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} placeholders."""
        if isinstance(config, str):
            def replace(match: "re.Match[str]") -> str:
                var_name, default = match.group(1), match.group(2)
                if default is None:
                    return os.environ.get(var_name, match.group(0))
                return os.environ.get(var_name, default)

            return _PLACEHOLDER.sub(replace, config)
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values.

        Args:
            user_config: Configuration dictionary merged over the current values
        """

        def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    deep_update(target[key], value)
                else:
                    target[key] = value

        deep_update(self._config, user_config)
        self._app_config = None

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return self._interpolate_values(self._config)

    @property
    def app_config(self) -> AppConfig:
        """Typed application configuration, validated on first access."""
        if self._app_config is None:
            self._app_config = self.validate_config()
        return self._app_config

    def validate_config(self) -> AppConfig:
        """
        Validate the configuration.

        Returns:
            The validated AppConfig

        Raises:
            ConfigurationError: If configuration is invalid with detailed error messages
        """
        try:
            return AppConfig(**self.get_config())
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            ) from e

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        type_mapping = {
            LoggingConfig: "logging",
            NotificationConfig: "notification",
            PaymentConfig: "payment",
        }
        if config_type not in type_mapping:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, type_mapping[config_type])

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.get_config()
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value
