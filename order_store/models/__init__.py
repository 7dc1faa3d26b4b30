from order_store.models.base import Base
from order_store.models.customer import Customer
from order_store.models.order import Order
from order_store.models.order_item import OrderItem
from order_store.models.product import Product

__all__ = ["Base", "Customer", "Order", "OrderItem", "Product"]
