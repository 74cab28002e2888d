"""
Product store factory.

Builds the DynamoDB product store from application settings, resolving
local-emulator mode once and passing it to the store explicitly.

Dependencies: backend.boundary.aws, backend.configs
System role: Product store instantiation
"""

import logging

from backend.boundary.aws.dynamodb_product_store import DynamoDBProductStore
from backend.configs import DynamoDBSettings, get_settings

logger = logging.getLogger(__name__)


def get_product_store(settings: DynamoDBSettings | None = None) -> DynamoDBProductStore:
    """
    Create a product store from configuration.

    Args:
        settings: DynamoDB settings; defaults to the cached application settings

    Returns:
        DynamoDBProductStore: Store bound to the configured table

    Raises:
        StoreConfigurationError: If the DynamoDB client cannot be configured
    """
    settings = settings or get_settings().dynamodb

    if settings.use_local:
        logger.info(
            f"{__name__}:get_product_store - Creating product store for "
            f"{settings.table_name} (local emulator at {settings.local_endpoint})"
        )
        return DynamoDBProductStore(
            table_name=settings.table_name,
            local=True,
            region=settings.local_region,
            endpoint_url=settings.local_endpoint,
            page_size=settings.page_size,
        )

    logger.info(
        f"{__name__}:get_product_store - Creating product store for {settings.table_name}"
    )
    return DynamoDBProductStore(
        table_name=settings.table_name,
        region=settings.region,
        page_size=settings.page_size,
    )
