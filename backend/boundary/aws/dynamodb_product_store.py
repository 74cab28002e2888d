"""
DynamoDB-backed product store.

Maps ProductStore operations onto Scan, GetItem, PutItem and DeleteItem
against a table keyed by the string attribute "id". Every operation is a
single round trip with no retries beyond what botocore does on its own.

Dependencies: boto3, botocore
System role: Production product persistence (DynamoDB)
"""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from backend.boundary.aws.dynamodb_client import create_dynamodb_client
from backend.boundary.aws.dynamodb_codec import (
    decode_item,
    decode_items,
    decode_key,
    encode_key,
    encode_product,
)
from backend.boundary.db.product_store import ProductStore
from backend.core.exceptions import ProductStoreTransportError, ValidationError
from backend.models.product import Product, ProductRange
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


class DynamoDBProductStore(ProductStore):
    """
    Product store on a DynamoDB table.

    Wraps a low-level boto3 client created once and reused for every call.
    Local-emulator mode is chosen explicitly by the caller.
    """

    def __init__(
        self,
        table_name: str,
        client=None,
        local: bool = False,
        region: str | None = None,
        endpoint_url: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """
        Initialize the store.

        Args:
            table_name: DynamoDB table holding products
            client: Pre-built DynamoDB client (skips client construction)
            local: Send requests to the local emulator
            region: AWS region (None uses default resolution)
            endpoint_url: Endpoint override
            page_size: Maximum products per list page

        Raises:
            ValidationError: If table_name is empty or page_size is not positive
            StoreConfigurationError: If the client cannot be configured
        """
        if not table_name:
            raise ValidationError("Table name is required", field="table_name")
        if page_size <= 0:
            raise ValidationError(
                f"Page size must be positive, got {page_size}", field="page_size"
            )

        self._table_name = table_name
        self._page_size = page_size
        if client is None:
            client = create_dynamodb_client(
                local=local,
                region=region,
                endpoint_url=endpoint_url,
            )
        self._client = client

    @property
    def table_name(self) -> str:
        """Name of the backing table."""
        return self._table_name

    @property
    def page_size(self) -> int:
        """Maximum number of products per list page."""
        return self._page_size

    def _transport_error(
        self,
        message: str,
        operation: str,
        exc: Exception,
        product_id: str | None = None,
    ) -> ProductStoreTransportError:
        """Log a failed request and build the error raised to the caller."""
        log_exception_with_context(
            logger,
            f"{__name__}:{operation} - {message}",
            exc,
            table=self._table_name,
            operation=operation,
            product_id=product_id,
        )
        details: dict[str, Any] = {"table": self._table_name}
        if product_id:
            details["product_id"] = product_id
        return ProductStoreTransportError(f"{message}: {exc}", operation=operation, details=details)

    def list_products(self, next_token: str | None = None) -> ProductRange:
        """
        Scan one page of products.

        Args:
            next_token: The `next` value of a previous page (last-seen id)

        Returns:
            ProductRange: Up to page_size products; `next` is set when more remain

        Raises:
            ProductStoreTransportError: If the scan request fails
            ProductDecodeError: If returned items cannot be mapped to products
        """
        scan_kwargs: dict[str, Any] = {
            "TableName": self._table_name,
            "Limit": self._page_size,
        }
        if next_token is not None:
            scan_kwargs["ExclusiveStartKey"] = encode_key(next_token)

        try:
            response = self._client.scan(**scan_kwargs)
        except (ClientError, BotoCoreError) as e:
            raise self._transport_error(
                "Failed to get items from DynamoDB", "scan", e
            ) from e

        products = decode_items(response.get("Items", []))

        next_key = None
        last_evaluated_key = response.get("LastEvaluatedKey")
        if last_evaluated_key:
            next_key = decode_key(last_evaluated_key)

        logger.debug(
            f"{__name__}:list_products - Scanned {len(products)} products "
            f"from {self._table_name} (next={next_key})"
        )
        return ProductRange(products=products, next=next_key)

    def get_product(self, product_id: str) -> Product | None:
        """
        Fetch a single product.

        Args:
            product_id: Product identifier

        Returns:
            Product | None: The product, or None if no item exists

        Raises:
            ProductStoreTransportError: If the request fails
            ProductDecodeError: If the stored item cannot be mapped to a product
        """
        try:
            response = self._client.get_item(
                TableName=self._table_name,
                Key=encode_key(product_id),
            )
        except (ClientError, BotoCoreError) as e:
            raise self._transport_error(
                "Failed to get item from DynamoDB", "get_item", e, product_id
            ) from e

        item = response.get("Item")
        if not item:
            logger.debug(f"{__name__}:get_product - Product {product_id} not found")
            return None

        return decode_item(item)

    def put_product(self, product: Product | dict[str, Any]) -> None:
        """
        Insert or fully overwrite a product.

        Args:
            product: Product model or mapping with at least an "id"

        Raises:
            ProductEncodeError: If the product cannot be marshaled
            ProductStoreTransportError: If the write is rejected
        """
        item = encode_product(product)
        product_id = item["id"]["S"]

        try:
            self._client.put_item(TableName=self._table_name, Item=item)
        except (ClientError, BotoCoreError) as e:
            raise self._transport_error("Cannot put item", "put_item", e, product_id) from e

        logger.info(f"{__name__}:put_product - Stored product {product_id}")

    def delete_product(self, product_id: str) -> None:
        """
        Delete a product; deleting a missing id is not an error.

        Args:
            product_id: Product identifier

        Raises:
            ProductStoreTransportError: If the request fails
        """
        try:
            self._client.delete_item(
                TableName=self._table_name,
                Key=encode_key(product_id),
            )
        except (ClientError, BotoCoreError) as e:
            raise self._transport_error("Can't delete item", "delete_item", e, product_id) from e

        logger.info(f"{__name__}:delete_product - Deleted product {product_id}")
