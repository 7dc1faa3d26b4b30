from order_store.repositories.customer import CustomerRepository
from order_store.repositories.order import OrderRepository
from order_store.repositories.product import ProductRepository

__all__ = ["CustomerRepository", "OrderRepository", "ProductRepository"]
