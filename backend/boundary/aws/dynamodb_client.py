"""
DynamoDB client construction.

Builds boto3 DynamoDB clients either against AWS (default credential and
region resolution) or against a local emulator endpoint.

Dependencies: boto3, botocore
System role: Client factory for the DynamoDB boundary
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError

from backend.core.exceptions import StoreConfigurationError

logger = logging.getLogger(__name__)

LOCAL_ENDPOINT = "http://localhost:4566"
LOCAL_REGION = "us-west-2"


def _build_client(**client_kwargs):
    """Create a DynamoDB client, turning resolution failures into StoreConfigurationError."""
    try:
        return boto3.client("dynamodb", **client_kwargs)
    except BotoCoreError as e:
        logger.error(f"{__name__}:_build_client - Unable to load AWS SDK config: {e}")
        raise StoreConfigurationError(
            f"Unable to load AWS SDK config: {e}",
            region=client_kwargs.get("region_name"),
            endpoint_url=client_kwargs.get("endpoint_url"),
        ) from e


def create_local_client(
    endpoint_url: str = LOCAL_ENDPOINT,
    region: str = LOCAL_REGION,
):
    """
    Create a DynamoDB client pointed at a local emulator.

    Args:
        endpoint_url: Emulator endpoint (LocalStack listens on port 4566)
        region: Signing region sent to the emulator

    Returns:
        DynamoDB low-level client

    Raises:
        StoreConfigurationError: If the client cannot be configured
    """
    logger.info(f"{__name__}:create_local_client - Using local endpoint {endpoint_url}")
    return _build_client(region_name=region, endpoint_url=endpoint_url)


def create_dynamodb_client(
    local: bool = False,
    region: str | None = None,
    endpoint_url: str | None = None,
):
    """
    Create a DynamoDB client for cloud or local-emulator use.

    Args:
        local: Target the local emulator instead of AWS
        region: AWS region; None defers to the default resolution chain
            (for local mode, None means LOCAL_REGION)
        endpoint_url: Endpoint override; in local mode defaults to LOCAL_ENDPOINT

    Returns:
        DynamoDB low-level client

    Raises:
        StoreConfigurationError: If credentials/region cannot be resolved
    """
    if local:
        return create_local_client(
            endpoint_url=endpoint_url or LOCAL_ENDPOINT,
            region=region or LOCAL_REGION,
        )

    client_kwargs = {}
    if region:
        client_kwargs["region_name"] = region
    if endpoint_url:
        client_kwargs["endpoint_url"] = endpoint_url
    return _build_client(**client_kwargs)
