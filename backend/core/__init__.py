"""
Core domain module.

Contains the exception hierarchy shared by every layer of the product store.
"""

from backend.core.exceptions import (
    ProductStoreException,
    ValidationError,
    StoreConfigurationError,
    ProductStoreTransportError,
    ProductCodecError,
    ProductEncodeError,
    ProductDecodeError,
)

__all__ = [
    "ProductStoreException",
    "ValidationError",
    "StoreConfigurationError",
    "ProductStoreTransportError",
    "ProductCodecError",
    "ProductEncodeError",
    "ProductDecodeError",
]
