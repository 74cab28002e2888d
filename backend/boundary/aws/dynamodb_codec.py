"""
Product marshaling for DynamoDB.

Converts Product models to DynamoDB attribute-value maps and back.
Floats go through Decimal (DynamoDB numbers), and numbers come back as int
when integral, float otherwise.

Dependencies: boto3.dynamodb.types, pydantic
System role: Wire codec between the product model and DynamoDB items
"""

from decimal import Decimal, DecimalException
from typing import Any

from boto3.dynamodb.types import Binary, TypeDeserializer, TypeSerializer
from pydantic import ValidationError as PydanticValidationError

from backend.core.exceptions import ProductDecodeError, ProductEncodeError
from backend.models.product import Product

AttributeValue = dict[str, Any]
Item = dict[str, AttributeValue]

KEY_ATTRIBUTE = "id"

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def _to_wire_value(value: Any) -> Any:
    """Replace floats with Decimals and reject empty sets, recursing into containers."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {key: _to_wire_value(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_wire_value(val) for val in value]
    if isinstance(value, (set, frozenset)):
        # DynamoDB has no empty string, number or binary set
        if not value:
            raise ValueError("Empty sets cannot be stored")
        return {_to_wire_value(val) for val in value}
    return value


def _from_wire_value(value: Any) -> Any:
    """Turn deserialized DynamoDB values into plain Python values."""
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, Binary):
        return bytes(value.value)
    if isinstance(value, dict):
        return {key: _from_wire_value(val) for key, val in value.items()}
    if isinstance(value, list):
        return [_from_wire_value(val) for val in value]
    if isinstance(value, set):
        return {_from_wire_value(val) for val in value}
    return value


def encode_key(product_id: str) -> Item:
    """
    Build the primary key map for a product id.

    Args:
        product_id: Product identifier

    Returns:
        Item: Key map, e.g. {"id": {"S": "p1"}}
    """
    return {KEY_ATTRIBUTE: {"S": product_id}}


def decode_key(key: Item) -> str:
    """
    Extract the product id from a key map such as LastEvaluatedKey.

    Raises:
        ProductDecodeError: If the key has no string id attribute
    """
    try:
        value = _deserializer.deserialize(key[KEY_ATTRIBUTE])
    except (KeyError, TypeError) as e:
        raise ProductDecodeError(f"Malformed key: {key}") from e
    if not isinstance(value, str):
        raise ProductDecodeError(f"Key attribute '{KEY_ATTRIBUTE}' is not a string: {key}")
    return value


def encode_product(product: Product | dict[str, Any]) -> Item:
    """
    Encode a product as a DynamoDB item.

    Args:
        product: Product model, or a plain mapping validated as one

    Returns:
        Item: Attribute-value map with one entry per product field

    Raises:
        ProductEncodeError: If the product is invalid or holds values DynamoDB cannot store
    """
    if isinstance(product, Product):
        model = product
    else:
        try:
            model = Product.model_validate(product)
        except PydanticValidationError as e:
            raise ProductEncodeError(f"Invalid product: {e}") from e

    fields = model.model_dump(mode="python")
    try:
        return {
            name: _serializer.serialize(_to_wire_value(value))
            for name, value in fields.items()
        }
    except (TypeError, ValueError, DecimalException) as e:
        raise ProductEncodeError(f"Unable to marshal product: {e}", product_id=model.id) from e


def decode_item(item: Item) -> Product:
    """
    Decode a DynamoDB item into a product.

    Args:
        item: Attribute-value map as returned by GetItem or Scan

    Returns:
        Product: Decoded product

    Raises:
        ProductDecodeError: If the item is malformed or has no string id
    """
    if not isinstance(item, dict):
        raise ProductDecodeError(f"Expected item map, got {type(item).__name__}")

    try:
        fields = {
            name: _from_wire_value(_deserializer.deserialize(value))
            for name, value in item.items()
        }
    except (TypeError, ValueError, AttributeError, DecimalException) as e:
        raise ProductDecodeError(f"Unable to unmarshal item: {e}") from e

    product_id = fields.get(KEY_ATTRIBUTE)
    if not isinstance(product_id, str):
        raise ProductDecodeError(f"Item has no string '{KEY_ATTRIBUTE}' attribute")

    try:
        return Product.model_validate(fields)
    except PydanticValidationError as e:
        raise ProductDecodeError(f"Invalid product item: {e}", product_id=product_id) from e


def decode_items(items: list[Item]) -> list[Product]:
    """Decode a list of DynamoDB items, failing on the first malformed one."""
    return [decode_item(item) for item in items]
