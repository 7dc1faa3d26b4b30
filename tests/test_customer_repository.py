import pytest
from prometheus_client import REGISTRY
from sqlalchemy.exc import IntegrityError

from order_store.core.config import get_settings
from order_store.domain.entity import Address, Customer
from order_store.exceptions import CustomerNotFoundError
from order_store.models import Customer as CustomerModel


@pytest.mark.asyncio
async def test_create_flattens_address(session_factory, customer_repository):
    customer = Customer("123", "Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))

    await customer_repository.create(customer)

    async with session_factory() as session:
        row = await session.get(CustomerModel, "123")
    assert (row.name, row.street, row.number, row.zipcode, row.city) == (
        "Customer 1",
        "Street 1",
        1,
        "Zipcode 1",
        "City 1",
    )
    assert row.active is False
    assert row.reward_points == 0


@pytest.mark.asyncio
async def test_create_duplicate_raises_storage_error(customer_repository):
    await customer_repository.create(Customer("1", "First"))

    with pytest.raises(IntegrityError):
        await customer_repository.create(Customer("1", "Second"))


@pytest.mark.asyncio
async def test_update_overwrites_columns(customer_repository):
    customer = Customer("123", "Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    await customer_repository.create(customer)

    customer.change_name("Customer 2")
    customer.change_address(Address("Street 2", 2, "Zipcode 2", "City 2"))
    customer.activate()
    customer.add_reward_points(10)
    await customer_repository.update(customer)

    assert await customer_repository.find("123") == customer


@pytest.mark.asyncio
async def test_find_without_address(customer_repository):
    await customer_repository.create(Customer("c", "No address"))

    found = await customer_repository.find("c")

    assert found.address is None
    assert found == Customer("c", "No address")


@pytest.mark.asyncio
async def test_find_unknown_raises(customer_repository):
    with pytest.raises(CustomerNotFoundError, match="Customer not found"):
        await customer_repository.find("456ABC")


@pytest.mark.asyncio
async def test_find_all(customer_repository):
    first = Customer("1", "First")
    first.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    first.add_reward_points(5)
    second = Customer("2", "Second")
    second.change_address(Address("Street 2", 2, "Zipcode 2", "City 2"))
    second.activate()

    await customer_repository.create(first)
    await customer_repository.create(second)

    customers = await customer_repository.find_all()

    assert len(customers) == 2
    assert first in customers
    assert second in customers


def _sample(operation, status):
    return REGISTRY.get_sample_value(
        "order_store_customers_db_operations_total",
        {"service": get_settings().SERVICE_NAME, "operation": operation, "status": status},
    ) or 0.0


@pytest.mark.asyncio
async def test_find_all_and_failed_create_are_counted(customer_repository):
    list_before = _sample("list", "success")
    failed_before = _sample("create", "failed")

    await customer_repository.create(Customer("1", "First"))
    with pytest.raises(IntegrityError):
        await customer_repository.create(Customer("1", "First again"))
    await customer_repository.find_all()

    assert _sample("list", "success") == list_before + 1
    assert _sample("create", "failed") == failed_before + 1
