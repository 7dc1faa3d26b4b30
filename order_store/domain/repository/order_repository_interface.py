from order_store.domain.entity.order import Order
from order_store.domain.repository.repository_interface import RepositoryInterface


class OrderRepositoryInterface(RepositoryInterface[Order]):
    pass
