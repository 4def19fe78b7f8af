"""Configuration for choosing variants in the examples."""

from pydantic import BaseModel, Field


class NotificationConfig(BaseModel):
    """Notification example configuration."""

    channel: str = Field("email", description="Default communication channel name")


class PaymentConfig(BaseModel):
    """Payment example configuration."""

    default_type: str = Field("credit_card", description="Default payment type name")
