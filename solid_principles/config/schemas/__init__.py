"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .examples_schema import NotificationConfig, PaymentConfig
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "NotificationConfig",
    "PaymentConfig",
]
