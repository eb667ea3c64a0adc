"""
Cart item model definition.

Cart items are free-form JSON documents. Only ``product`` and ``quantity``
are checked, everything else the caller sends is stored as-is.
"""
import logging
from typing import Any

from bson import ObjectId

from .base import DataValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Product and quantity are required fields."
UPDATE_FIELDS_MESSAGE = "At least one of product or quantity must be provided for update."
INVALID_ID_MESSAGE = "Invalid cart item ID."


def _without_id(data: dict) -> dict[str, Any]:
    """Drop any caller supplied _id so identifiers stay store-assigned"""
    return {key: value for key, value in data.items() if key != "_id"}


class CartItem:
    """Represents a single item stored in the carts collection."""

    def __init__(self, fields: dict[str, Any] | None = None):
        self.fields = dict(fields or {})

    def __repr__(self):
        return f"<CartItem product=[{self.product}] id=[{self.id}]>"

    def __eq__(self, other):
        return isinstance(other, CartItem) and self.fields == other.fields

    @property
    def id(self):  # pylint: disable=invalid-name
        """The ObjectId assigned by MongoDB, or None before insertion"""
        return self.fields.get("_id")

    @property
    def product(self):
        return self.fields.get("product")

    @property
    def quantity(self):
        return self.fields.get("quantity")

    # ------------------------------------------------------------------
    # SERIALIZATION
    # ------------------------------------------------------------------
    def serialize(self) -> dict[str, Any]:
        """Serializes a CartItem into a JSON friendly dictionary"""
        data = dict(self.fields)
        if data.get("_id") is not None:
            data["_id"] = str(data["_id"])
        return data

    def deserialize(self, data):
        """
        Deserializes a CartItem from a dictionary

        Args:
            data (dict): the request body of a create call

        Raises:
            DataValidationError: when product or quantity is missing or empty
        """
        if not isinstance(data, dict):
            raise DataValidationError(REQUIRED_FIELDS_MESSAGE)
        if not data.get("product") or not data.get("quantity"):
            raise DataValidationError(REQUIRED_FIELDS_MESSAGE)
        self.fields = _without_id(data)
        return self

    # ------------------------------------------------------------------
    # CLASS METHODS
    # ------------------------------------------------------------------
    @classmethod
    def deserialize_patch(cls, data) -> dict[str, Any]:
        """Validates an update body and returns the fields to merge"""
        if not isinstance(data, dict):
            raise DataValidationError(UPDATE_FIELDS_MESSAGE)
        if not data.get("product") and not data.get("quantity"):
            raise DataValidationError(UPDATE_FIELDS_MESSAGE)
        return _without_id(data)

    @classmethod
    def parse_id(cls, item_id) -> ObjectId:
        """Converts an identifier from the URL into an ObjectId"""
        if not isinstance(item_id, str) or not ObjectId.is_valid(item_id):
            logger.warning("Rejected malformed cart item id %r", item_id)
            raise DataValidationError(INVALID_ID_MESSAGE)
        return ObjectId(item_id)
