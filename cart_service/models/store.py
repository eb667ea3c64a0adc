"""
MongoDB access for cart items.
"""
import logging

from bson.errors import BSONError
from flask import current_app
from pymongo import MongoClient, ReturnDocument
from pymongo.errors import PyMongoError

from .base import StorageError
from .cart_item import CartItem

logger = logging.getLogger(__name__)

COLLECTION_NAME = "carts"

# Encoding a document to BSON can fail before the driver sends anything
STORE_ERRORS = (PyMongoError, BSONError, OverflowError)


class CartStore:
    """Create/read/update/delete helpers over the carts collection."""

    def __init__(self, collection):
        self.collection = collection

    def _perform_db_action(self, action: str, message: str, work):
        """Execute a store call and turn driver failures into StorageError."""
        try:
            return work()
        except STORE_ERRORS as error:
            logger.error("Error %s cart item: %s", action, error)
            raise StorageError(message) from error

    def create(self, item: CartItem) -> CartItem:
        """Inserts a new document and returns it with its generated _id"""
        logger.info("Creating CartItem for product %s", item.product)
        document = dict(item.fields)
        result = self._perform_db_action(
            "creating",
            "Failed to create cart item.",
            lambda: self.collection.insert_one(document),
        )
        document["_id"] = result.inserted_id
        return CartItem(document)

    def all(self) -> list[CartItem]:
        """Returns all of the CartItems in the collection"""
        logger.info("Processing all CartItems")
        documents = self._perform_db_action(
            "listing",
            "Failed to retrieve cart items.",
            lambda: list(self.collection.find({})),
        )
        return [CartItem(document) for document in documents]

    def find(self, item_id) -> CartItem | None:
        """Finds a CartItem by its ObjectId"""
        logger.info("Processing lookup for id %s ...", item_id)
        document = self._perform_db_action(
            "retrieving",
            "Failed to retrieve cart item.",
            lambda: self.collection.find_one({"_id": item_id}),
        )
        return CartItem(document) if document is not None else None

    def update(self, item_id, changes: dict) -> CartItem | None:
        """Merges top level fields into a document and returns the result"""
        logger.info("Saving CartItem with id: %s", item_id)
        document = self._perform_db_action(
            "updating",
            "Failed to update cart item.",
            lambda: self.collection.find_one_and_update(
                {"_id": item_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            ),
        )
        return CartItem(document) if document is not None else None

    def delete(self, item_id) -> bool:
        """Removes one document, returning False when nothing matched"""
        logger.info("Deleting CartItem with id: %s", item_id)
        result = self._perform_db_action(
            "deleting",
            "Failed to delete cart item.",
            lambda: self.collection.delete_one({"_id": item_id}),
        )
        return result.deleted_count == 1


def init_store(app, client=None) -> CartStore:
    """
    Connects to MongoDB and attaches a CartStore to the application

    A pre-built client (for example a mongomock client in tests) is used
    as-is; otherwise a new MongoClient is created and pinged so that a bad
    connection fails at start-up rather than on the first request.
    """
    if client is None:
        app.logger.info("Connecting to MongoDB database %s", app.config["DB_NAME"])
        client = MongoClient(
            app.config["MONGODB_URI"],
            serverSelectionTimeoutMS=app.config["MONGODB_TIMEOUT_MS"],
        )
        client.admin.command("ping")
    store = CartStore(client[app.config["DB_NAME"]][COLLECTION_NAME])
    app.extensions["cart_store"] = store
    return store


def get_store() -> CartStore:
    """Returns the CartStore of the application handling the request"""
    return current_app.extensions["cart_store"]
