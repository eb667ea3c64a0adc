"""Models package for the Cart service."""
from .base import CartServiceError, DataValidationError, NotFoundError, StorageError
from .cart_item import CartItem
from .store import CartStore, get_store, init_store

__all__ = [
    "CartServiceError",
    "DataValidationError",
    "NotFoundError",
    "StorageError",
    "CartItem",
    "CartStore",
    "get_store",
    "init_store",
]
