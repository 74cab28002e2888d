"""
Exception hierarchy for the product store.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ProductStoreException(Exception):
    """Base exception for all product store errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(ProductStoreException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class StoreConfigurationError(ProductStoreException):
    """Raised when the database client cannot be configured at startup."""

    def __init__(
        self,
        message: str,
        region: str | None = None,
        endpoint_url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            region: Region the client was built for, if one was given
            endpoint_url: Endpoint override, if one was given
            details: Additional context
        """
        details = details or {}
        if region:
            details["region"] = region
        if endpoint_url:
            details["endpoint_url"] = endpoint_url
        super().__init__(message, details)


class ProductStoreTransportError(ProductStoreException):
    """Raised when a request to the database service fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize transport error.

        Args:
            message: Error message
            operation: Operation that failed (scan, get_item, put_item, delete_item)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
        self.operation = operation


class ProductCodecError(ProductStoreException):
    """Base exception for marshaling between products and database items."""

    def __init__(
        self,
        message: str,
        product_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize codec error.

        Args:
            message: Error message
            product_id: ID of the product being marshaled, when known
            details: Additional context
        """
        details = details or {}
        if product_id:
            details["product_id"] = product_id
        super().__init__(message, details)
        self.product_id = product_id


class ProductEncodeError(ProductCodecError):
    """Raised when a product cannot be encoded into a database item."""


class ProductDecodeError(ProductCodecError):
    """Raised when a database item cannot be decoded into a product."""
