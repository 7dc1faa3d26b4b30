import uuid
from decimal import Decimal

import pytest_asyncio

from order_store.db import create_schema, make_engine, make_session_factory
from order_store.domain.entity import Address, Customer, Order, OrderItem, Product
from order_store.repositories import CustomerRepository, OrderRepository, ProductRepository


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory SQLite database with the full schema."""
    engine = make_engine("sqlite+aiosqlite:///:memory:")
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return make_session_factory(engine)


@pytest_asyncio.fixture
async def customer_repository(session_factory):
    return CustomerRepository(session_factory)


@pytest_asyncio.fixture
async def product_repository(session_factory):
    return ProductRepository(session_factory)


@pytest_asyncio.fixture
async def order_repository(session_factory):
    return OrderRepository(session_factory)


@pytest_asyncio.fixture
async def make_order_item(product_repository):
    """Persist a product and return an order item pointing at it."""

    async def factory(price="10", quantity=1):
        product = Product(str(uuid.uuid4()), f"Product {uuid.uuid4().hex[:8]}", Decimal(price))
        await product_repository.create(product)
        return OrderItem(str(uuid.uuid4()), product.name, product.id, product.price, quantity)

    return factory


@pytest_asyncio.fixture
async def make_order(customer_repository, order_repository):
    """Persist a customer and an order for it with the given items."""

    async def factory(items, order_id=None):
        customer = Customer(str(uuid.uuid4()), "Customer")
        customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
        await customer_repository.create(customer)

        order = Order(order_id or str(uuid.uuid4()), customer.id, items)
        await order_repository.create(order)
        return order

    return factory
