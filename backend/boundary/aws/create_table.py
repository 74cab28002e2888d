"""
Product table creation script.

Creates the products table (string hash key "id", on-demand billing) on the
configured DynamoDB endpoint, typically the local emulator.

Dependencies: botocore, backend.configs
System role: Product table initialization

Usage:
    ENVIRONMENT=local python -m backend.boundary.aws.create_table
"""

import logging

from botocore.exceptions import ClientError

from backend.boundary.aws.dynamodb_client import create_dynamodb_client
from backend.boundary.aws.dynamodb_codec import KEY_ATTRIBUTE
from backend.configs import get_settings
from backend.observability.logger import configure_logging

logger = logging.getLogger(__name__)


def create_products_table(client, table_name: str) -> bool:
    """
    Create the products table and wait until it exists.

    Idempotent: an existing table is left unchanged.

    Args:
        client: DynamoDB low-level client
        table_name: Table to create

    Returns:
        bool: True if the table was created, False if it already existed

    Raises:
        ClientError: If creation fails for any reason other than the table existing
    """
    try:
        client.create_table(
            TableName=table_name,
            AttributeDefinitions=[{"AttributeName": KEY_ATTRIBUTE, "AttributeType": "S"}],
            KeySchema=[{"AttributeName": KEY_ATTRIBUTE, "KeyType": "HASH"}],
            BillingMode="PAY_PER_REQUEST",
        )
    except ClientError as e:
        if e.response.get("Error", {}).get("Code") == "ResourceInUseException":
            logger.info(f"{__name__}:create_products_table - Table {table_name} already exists")
            return False
        raise

    client.get_waiter("table_exists").wait(TableName=table_name)
    logger.info(f"{__name__}:create_products_table - Table {table_name} created")
    return True


def drop_products_table(client, table_name: str) -> bool:
    """
    Delete the products table and all of its items.

    WARNING: Irreversible data loss. Only use against development tables.

    Args:
        client: DynamoDB low-level client
        table_name: Table to delete

    Returns:
        bool: True if the table was deleted, False if it did not exist
    """
    try:
        client.delete_table(TableName=table_name)
    except ClientError as e:
        if e.response.get("Error", {}).get("Code") == "ResourceNotFoundException":
            logger.info(f"{__name__}:drop_products_table - Table {table_name} does not exist")
            return False
        raise

    client.get_waiter("table_not_exists").wait(TableName=table_name)
    logger.info(f"{__name__}:drop_products_table - Table {table_name} deleted")
    return True


def main() -> None:
    """Create the configured products table."""
    settings = get_settings()
    configure_logging(settings.log_level)

    dynamodb = settings.dynamodb
    if dynamodb.use_local:
        client = create_dynamodb_client(
            local=True,
            region=dynamodb.local_region,
            endpoint_url=dynamodb.local_endpoint,
        )
    else:
        client = create_dynamodb_client(region=dynamodb.region)

    create_products_table(client, dynamodb.table_name)


if __name__ == "__main__":
    main()
