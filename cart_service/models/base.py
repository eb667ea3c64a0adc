"""
Error types shared by the cart models and resources.
"""


class CartServiceError(Exception):
    """Base class for errors that are reported back to API callers"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataValidationError(CartServiceError):
    """Used for data validation errors when deserializing"""


class NotFoundError(CartServiceError):
    """Raised when no cart item matches the requested identifier"""


class StorageError(CartServiceError):
    """Raised when a MongoDB operation fails"""
