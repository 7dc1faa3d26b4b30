from __future__ import annotations

from typing import List

from loguru import logger
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from order_store.core.config import get_settings
from order_store.core.metrics import CUSTOMERS_DB_OPERATIONS_TOTAL
from order_store.db import AsyncSessionLocal
from order_store.domain.entity.address import Address
from order_store.domain.entity.customer import Customer
from order_store.domain.repository.customer_repository_interface import CustomerRepositoryInterface
from order_store.exceptions import CustomerNotFoundError
from order_store.models.customer import Customer as CustomerModel

SERVICE_NAME = get_settings().SERVICE_NAME


def _track(operation: str, status: str) -> None:
    CUSTOMERS_DB_OPERATIONS_TOTAL.labels(
        service=SERVICE_NAME,
        operation=operation,
        status=status,
    ).inc()


def _columns(entity: Customer) -> dict:
    address = entity.address
    return {
        "name": entity.name,
        "street": address.street if address else None,
        "number": address.number if address else None,
        "zipcode": address.zipcode if address else None,
        "city": address.city if address else None,
        "active": entity.is_active(),
        "reward_points": entity.reward_points,
    }


class CustomerRepository(CustomerRepositoryInterface):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        self.session_factory = session_factory or AsyncSessionLocal

    async def create(self, entity: Customer) -> None:
        _track("create", "attempt")
        logger.info(
            "Attempt to create customer in DB. customer_id='{customer_id}'",
            customer_id=entity.id,
        )
        try:
            async with self.session_factory() as session:
                session.add(CustomerModel(id=entity.id, **_columns(entity)))
                await session.commit()
        except Exception:
            logger.error(
                "Failed to create customer in DB. customer_id='{customer_id}'",
                customer_id=entity.id,
            )
            _track("create", "failed")
            raise

        logger.info(
            "Customer successfully created in DB: customer_id='{customer_id}'",
            customer_id=entity.id,
        )
        _track("create", "success")

    async def update(self, entity: Customer) -> None:
        _track("update", "attempt")
        logger.info(
            "Attempt to update customer in DB. customer_id='{customer_id}'",
            customer_id=entity.id,
        )
        try:
            async with self.session_factory() as session:
                await session.execute(
                    update(CustomerModel)
                    .where(CustomerModel.id == entity.id)
                    .values(**_columns(entity))
                )
                await session.commit()
        except Exception:
            logger.error(
                "Failed to update customer in DB. customer_id='{customer_id}'",
                customer_id=entity.id,
            )
            _track("update", "failed")
            raise

        logger.info(
            "Customer successfully updated in DB: customer_id='{customer_id}'",
            customer_id=entity.id,
        )
        _track("update", "success")

    async def find(self, id: str) -> Customer:
        _track("get", "attempt")
        logger.info(
            "Fetching customer from DB. customer_id='{customer_id}'",
            customer_id=id,
        )
        try:
            async with self.session_factory() as session:
                row = (
                    await session.execute(select(CustomerModel).where(CustomerModel.id == id))
                ).scalar_one()
            customer = self.to_customer_entity(row)
        except Exception as exc:
            logger.warning(
                "Customer not found in DB. customer_id='{customer_id}'",
                customer_id=id,
            )
            _track("get", "not_found")
            raise CustomerNotFoundError(id) from exc

        _track("get", "success")
        return customer

    async def find_all(self) -> List[Customer]:
        _track("list", "attempt")
        logger.info("Request to get all customers from DB")
        try:
            async with self.session_factory() as session:
                rows = (await session.execute(select(CustomerModel))).scalars().all()
        except Exception:
            _track("list", "failed")
            raise

        logger.info(
            "Customers list retrieved from DB, count={count}",
            count=len(rows),
        )
        _track("list", "success")
        return [self.to_customer_entity(row) for row in rows]

    @staticmethod
    def to_customer_entity(row: CustomerModel) -> Customer:
        address = None
        if row.street is not None:
            address = Address(row.street, row.number, row.zipcode, row.city)
        return Customer(
            row.id,
            row.name,
            address=address,
            active=row.active,
            reward_points=row.reward_points,
        )
