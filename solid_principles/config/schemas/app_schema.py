"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .examples_schema import NotificationConfig, PaymentConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    notification: NotificationConfig = Field(default_factory=lambda: NotificationConfig())
    payment: PaymentConfig = Field(default_factory=lambda: PaymentConfig())


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
