from order_store.domain.entity.customer import Customer
from order_store.domain.repository.repository_interface import RepositoryInterface


class CustomerRepositoryInterface(RepositoryInterface[Customer]):
    pass
