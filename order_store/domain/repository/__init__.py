from order_store.domain.repository.customer_repository_interface import CustomerRepositoryInterface
from order_store.domain.repository.order_repository_interface import OrderRepositoryInterface
from order_store.domain.repository.product_repository_interface import ProductRepositoryInterface
from order_store.domain.repository.repository_interface import RepositoryInterface

__all__ = [
    "CustomerRepositoryInterface",
    "OrderRepositoryInterface",
    "ProductRepositoryInterface",
    "RepositoryInterface",
]
