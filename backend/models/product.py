"""
Product domain models.

Product records and paged product listings exchanged with the product store.

Dependencies: pydantic
System role: Product data contracts
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product record keyed by id.

    Any attribute besides id is kept as-is and persisted as a flat field
    of the stored item.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1, description="Unique product identifier")

    @property
    def attributes(self) -> dict[str, Any]:
        """Extra fields of the product, excluding id."""
        return dict(self.model_extra or {})


class ProductRange(BaseModel):
    """One page of products with an optional continuation token."""

    products: list[Product] = Field(default_factory=list)
    next: str | None = Field(
        default=None,
        description="Token to pass back to resume listing; None on the last page",
    )
