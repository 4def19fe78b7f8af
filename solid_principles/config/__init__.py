"""Configuration package with clean public API."""

from .manager import ConfigurationManager
from .schemas import AppConfig, LoggingConfig, NotificationConfig, PaymentConfig, validate_config

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "NotificationConfig",
    "PaymentConfig",
    "ConfigurationManager",
]
