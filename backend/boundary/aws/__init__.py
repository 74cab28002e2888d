"""
AWS boundary modules.

Exports: DynamoDBProductStore, get_product_store, create_dynamodb_client,
create_local_client
"""

from .dynamodb_client import create_dynamodb_client, create_local_client
from .dynamodb_product_store import DynamoDBProductStore
from .product_store_factory import get_product_store

__all__ = [
    "DynamoDBProductStore",
    "get_product_store",
    "create_dynamodb_client",
    "create_local_client",
]
