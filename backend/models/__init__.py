"""
Domain models for the product store.

Exports: Product, ProductRange
"""

from backend.models.product import Product, ProductRange

__all__ = ["Product", "ProductRange"]
