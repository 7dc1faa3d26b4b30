"""
Exceptions raised by the repositories.

Domain validation failures are plain ``ValueError``; storage errors on
create/update propagate as the SQLAlchemy exception that caused them.
"""


class OrderStoreError(Exception):
    """Base exception for all order store errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(OrderStoreError):
    """Raised when an entity cannot be loaded by id"""

    entity = "Entity"

    def __init__(self, id: str, message: str | None = None):
        super().__init__(message or f"{self.entity} not found", {"id": id})


class OrderNotFoundError(NotFoundError):
    entity = "Order"


class CustomerNotFoundError(NotFoundError):
    entity = "Customer"


class ProductNotFoundError(NotFoundError):
    entity = "Product"
