from __future__ import annotations

from typing import List

from loguru import logger
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from order_store.core.config import get_settings
from order_store.core.metrics import ORDERS_DB_OPERATIONS_TOTAL
from order_store.db import AsyncSessionLocal
from order_store.domain.entity.order import Order
from order_store.domain.entity.order_item import OrderItem
from order_store.domain.repository.order_repository_interface import OrderRepositoryInterface
from order_store.exceptions import OrderNotFoundError
from order_store.models.order import Order as OrderModel
from order_store.models.order_item import OrderItem as OrderItemModel

SERVICE_NAME = get_settings().SERVICE_NAME


def _track(operation: str, status: str) -> None:
    ORDERS_DB_OPERATIONS_TOTAL.labels(
        service=SERVICE_NAME,
        operation=operation,
        status=status,
    ).inc()


def _item_row(item: OrderItem, position: int, order_id: str | None = None) -> OrderItemModel:
    row = OrderItemModel(
        id=item.id,
        name=item.name,
        price=item.price,
        product_id=item.product_id,
        quantity=item.quantity,
        position=position,
    )
    if order_id is not None:
        row.order_id = order_id
    return row


class OrderRepository(OrderRepositoryInterface):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        self.session_factory = session_factory or AsyncSessionLocal

    async def create(self, entity: Order) -> None:
        _track("create", "attempt")
        logger.info(
            "Attempt to create order in DB. order_id='{order_id}', customer_id='{customer_id}' with {items_count} items",
            order_id=entity.id,
            customer_id=entity.customer_id,
            items_count=len(entity.items),
        )
        try:
            async with self.session_factory() as session:
                # заказ и позиции уходят одним add: позиции получают order_id через relationship
                session.add(
                    OrderModel(
                        id=entity.id,
                        customer_id=entity.customer_id,
                        total=entity.total(),
                        items=[_item_row(item, position) for position, item in enumerate(entity.items)],
                    )
                )
                await session.commit()
        except Exception:
            logger.error(
                "Failed to create order in DB. order_id='{order_id}'",
                order_id=entity.id,
            )
            _track("create", "failed")
            raise

        logger.info(
            "Order persisted in DB. order_id='{order_id}', total={total}",
            order_id=entity.id,
            total=float(entity.total()),
        )
        _track("create", "success")

    async def update(self, entity: Order) -> None:
        _track("update", "attempt")
        logger.info(
            "Attempt to update order in DB. order_id='{order_id}' with {items_count} items",
            order_id=entity.id,
            items_count=len(entity.items),
        )
        async with self.session_factory() as session:
            try:
                async with session.begin():
                    await session.execute(
                        delete(OrderItemModel).where(OrderItemModel.order_id == entity.id)
                    )
                    for position, item in enumerate(entity.items):
                        logger.debug(
                            "Re-inserting order item item_id='{item_id}', product_id='{product_id}', qty={qty}",
                            item_id=item.id,
                            product_id=item.product_id,
                            qty=item.quantity,
                        )
                        session.add(_item_row(item, position, order_id=entity.id))
                    await session.flush()
                    await session.execute(
                        update(OrderModel)
                        .where(OrderModel.id == entity.id)
                        .values(total=entity.total())
                    )
            except Exception:
                # транзакция уже откатана session.begin(); наружу ошибку не отдаём
                logger.exception(
                    "Failed to update order in DB, transaction rolled back. order_id='{order_id}'",
                    order_id=entity.id,
                )
                _track("update", "failed")
                return

        logger.info(
            "Order updated in DB. order_id='{order_id}', total={total}",
            order_id=entity.id,
            total=float(entity.total()),
        )
        _track("update", "success")

    async def find(self, id: str) -> Order:
        _track("get", "attempt")
        logger.info(
            "Fetching order from DB. order_id='{order_id}'",
            order_id=id,
        )
        q = select(OrderModel).options(selectinload(OrderModel.items)).where(OrderModel.id == id)
        try:
            async with self.session_factory() as session:
                row = (await session.execute(q)).scalar_one()
            order = self.to_order_entity(row)
        except Exception as exc:
            logger.warning(
                "Order not found in DB. order_id='{order_id}', reason='{reason}'",
                order_id=id,
                reason=repr(exc),
            )
            _track("get", "not_found")
            raise OrderNotFoundError(id) from exc

        logger.info(
            "Successfully fetched order from DB. order_id='{order_id}'",
            order_id=id,
        )
        _track("get", "success")
        return order

    async def find_all(self) -> List[Order]:
        _track("list", "attempt")
        logger.info("Request to get all orders from DB")
        q = select(OrderModel).options(selectinload(OrderModel.items))
        try:
            async with self.session_factory() as session:
                rows = (await session.execute(q)).scalars().all()
        except Exception:
            _track("list", "failed")
            raise

        logger.info(
            "Orders list retrieved from DB, count={count}",
            count=len(rows),
        )
        _track("list", "success")
        return [self.to_order_entity(row) for row in rows]

    @staticmethod
    def to_order_entity(row: OrderModel) -> Order:
        return Order(
            row.id,
            row.customer_id,
            [
                OrderItem(
                    item.id,
                    item.name,
                    item.product_id,
                    item.price,
                    item.quantity,
                )
                for item in row.items
            ],
        )
