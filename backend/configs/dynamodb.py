"""
DynamoDB configuration settings.

Table name, region and local emulator endpoint for the product store.
Local mode is resolved here once and handed to the store explicitly.

Dependencies: pydantic, pydantic_settings
System role: Product table connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class DynamoDBSettings(BaseSettings):
    """DynamoDB product table configuration."""

    # Merged with BaseSettings.model_config by pydantic
    model_config = SettingsConfigDict(env_prefix="DYNAMODB_")

    environment: str = Field(
        default="development",
        validation_alias="environment",
        description="Application environment (local selects the emulator)",
    )
    table_name: str = Field(default="products", description="DynamoDB table holding products")
    region: str | None = Field(
        default=None,
        description="AWS region (None uses the default boto3 resolution chain)",
    )
    local: bool = Field(default=False, description="Send requests to the local emulator")
    local_endpoint: str = Field(
        default="http://localhost:4566",
        description="Endpoint URL of the local DynamoDB emulator",
    )
    local_region: str = Field(
        default="us-west-2",
        description="Signing region used against the local emulator",
    )
    page_size: int = Field(default=20, gt=0, description="Products returned per list page")

    @property
    def use_local(self) -> bool:
        """
        Whether the store should target the local emulator.

        Returns:
            bool: True when DYNAMODB_LOCAL is set or ENVIRONMENT is "local"
        """
        return self.local or self.environment.lower() == "local"
