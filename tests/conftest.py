"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory DynamoDB client fake, mock boto3 clients, sample products
Dependencies: pytest, botocore
System role: Test infrastructure and fixture management
"""

import copy
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from backend.boundary.aws.dynamodb_product_store import DynamoDBProductStore
from backend.configs import get_settings
from backend.models.product import Product

TABLE_NAME = "products-test"


def make_client_error(code: str, operation: str, message: str = "boom") -> ClientError:
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeDynamoDBClient:
    """
    Minimal in-memory stand-in for a DynamoDB low-level client.

    Holds attribute-value items for a single table keyed by the "id"
    string attribute. Scan walks items in insertion order and honours
    Limit / ExclusiveStartKey the way the service does.
    """

    def __init__(self, table_name: str = TABLE_NAME) -> None:
        self.table_name = table_name
        self.items: dict[str, dict] = {}
        self.calls: list[str] = []

    def _check_table(self, table_name: str, operation: str) -> None:
        if table_name != self.table_name:
            raise make_client_error(
                "ResourceNotFoundException", operation, "Requested resource not found"
            )

    @staticmethod
    def _key_of(key: dict, operation: str) -> str:
        if set(key) != {"id"} or set(key["id"]) != {"S"}:
            raise make_client_error(
                "ValidationException", operation, "The provided key element does not match the schema"
            )
        return key["id"]["S"]

    def scan(self, TableName: str, Limit: int | None = None, ExclusiveStartKey: dict | None = None):
        self.calls.append("scan")
        self._check_table(TableName, "Scan")

        keys = list(self.items)
        start = 0
        if ExclusiveStartKey is not None:
            start_id = self._key_of(ExclusiveStartKey, "Scan")
            start = keys.index(start_id) + 1 if start_id in keys else len(keys)

        page_keys = keys[start:]
        if Limit is not None:
            page_keys = page_keys[:Limit]

        response = {
            "Items": [copy.deepcopy(self.items[key]) for key in page_keys],
            "Count": len(page_keys),
        }
        # The service reports LastEvaluatedKey whenever Limit cut the page short
        if Limit is not None and len(page_keys) == Limit and page_keys:
            response["LastEvaluatedKey"] = {"id": {"S": page_keys[-1]}}
        return response

    def get_item(self, TableName: str, Key: dict):
        self.calls.append("get_item")
        self._check_table(TableName, "GetItem")
        product_id = self._key_of(Key, "GetItem")
        if product_id not in self.items:
            return {}
        return {"Item": copy.deepcopy(self.items[product_id])}

    def put_item(self, TableName: str, Item: dict):
        self.calls.append("put_item")
        self._check_table(TableName, "PutItem")
        product_id = self._key_of({"id": Item.get("id", {})}, "PutItem")
        self.items[product_id] = copy.deepcopy(Item)
        return {}

    def delete_item(self, TableName: str, Key: dict):
        self.calls.append("delete_item")
        self._check_table(TableName, "DeleteItem")
        self.items.pop(self._key_of(Key, "DeleteItem"), None)
        return {}


@pytest.fixture
def table_name() -> str:
    """Provide the table name the fakes are bound to."""
    return TABLE_NAME


@pytest.fixture
def client_error():
    """Provide a factory for botocore ClientError instances."""
    return make_client_error


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_client() -> FakeDynamoDBClient:
    """Provide an empty in-memory DynamoDB client."""
    return FakeDynamoDBClient()


@pytest.fixture
def fake_store(fake_client: FakeDynamoDBClient) -> DynamoDBProductStore:
    """Provide a product store backed by the in-memory client."""
    return DynamoDBProductStore(table_name=TABLE_NAME, client=fake_client)


@pytest.fixture
def mock_client() -> MagicMock:
    """Provide a mock DynamoDB client returning empty responses."""
    client = MagicMock()
    client.scan.return_value = {"Items": []}
    client.get_item.return_value = {}
    client.put_item.return_value = {}
    client.delete_item.return_value = {}
    return client


@pytest.fixture
def mock_store(mock_client: MagicMock) -> DynamoDBProductStore:
    """Provide a product store backed by a mock client."""
    return DynamoDBProductStore(table_name=TABLE_NAME, client=mock_client)


@pytest.fixture
def widget() -> Product:
    """Provide a sample product."""
    return Product(id="p1", name="Widget", price=9.99, stock=12, tags=["tools", "small"])
