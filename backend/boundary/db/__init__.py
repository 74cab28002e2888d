"""
Storage interface for the product boundary.

Exports: ProductStore

Dependencies: backend.models
System role: Backend-agnostic product persistence contract
"""

from backend.boundary.db.product_store import ProductStore

__all__ = ["ProductStore"]
