"""
Boundary layer for external system integrations.

Handles all interactions with the managed database service.
Provides the product store interface and its DynamoDB adapter.
"""
