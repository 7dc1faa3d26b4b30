from order_store.domain.entity.product import Product
from order_store.domain.repository.repository_interface import RepositoryInterface


class ProductRepositoryInterface(RepositoryInterface[Product]):
    pass
