"""Base domain exceptions shared by all examples."""

from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", {"missing_fields": missing_fields or []}
        )
        self.missing_fields = missing_fields or []


class UnsupportedTypeError(DomainException):
    """Raised when a variant name has no registered factory."""

    def __init__(self, kind: str, type_name: str, available: Optional[List[str]] = None):
        available = available or []
        super().__init__(
            f"Unsupported {kind} type: '{type_name}'. Available: {', '.join(available)}",
            "UNSUPPORTED_TYPE",
            {"kind": kind, "type_name": type_name, "available": available},
        )
        self.kind = kind
        self.type_name = type_name
        self.available = available
