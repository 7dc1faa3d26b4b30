from order_store.domain.entity.address import Address
from order_store.domain.entity.customer import Customer
from order_store.domain.entity.order import Order
from order_store.domain.entity.order_item import OrderItem
from order_store.domain.entity.product import Product

__all__ = ["Address", "Customer", "Order", "OrderItem", "Product"]
