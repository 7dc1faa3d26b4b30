from order_store.domain.entity import Address, Customer, Order, OrderItem, Product
from order_store.exceptions import (
    CustomerNotFoundError,
    NotFoundError,
    OrderNotFoundError,
    OrderStoreError,
    ProductNotFoundError,
)
from order_store.repositories import CustomerRepository, OrderRepository, ProductRepository

__version__ = "0.1.0"

__all__ = [
    "Address",
    "Customer",
    "CustomerNotFoundError",
    "CustomerRepository",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderNotFoundError",
    "OrderRepository",
    "OrderStoreError",
    "Product",
    "ProductNotFoundError",
    "ProductRepository",
]
