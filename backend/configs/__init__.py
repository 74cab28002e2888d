"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from backend.configs.dynamodb import DynamoDBSettings
from backend.configs.settings import Settings, get_settings

__all__ = ["DynamoDBSettings", "Settings", "get_settings"]
