from __future__ import annotations

from typing import List

from loguru import logger
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from order_store.core.config import get_settings
from order_store.core.metrics import PRODUCTS_DB_OPERATIONS_TOTAL
from order_store.db import AsyncSessionLocal
from order_store.domain.entity.product import Product
from order_store.domain.repository.product_repository_interface import ProductRepositoryInterface
from order_store.exceptions import ProductNotFoundError
from order_store.models.product import Product as ProductModel

SERVICE_NAME = get_settings().SERVICE_NAME


def _track(operation: str, status: str) -> None:
    PRODUCTS_DB_OPERATIONS_TOTAL.labels(
        service=SERVICE_NAME,
        operation=operation,
        status=status,
    ).inc()


class ProductRepository(ProductRepositoryInterface):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        self.session_factory = session_factory or AsyncSessionLocal

    async def create(self, entity: Product) -> None:
        _track("create", "attempt")
        logger.info(
            "Attempt to create a new product. id={id}, name='{name}', price={price}",
            id=entity.id,
            name=entity.name,
            price=float(entity.price),
        )
        try:
            async with self.session_factory() as session:
                session.add(ProductModel(id=entity.id, name=entity.name, price=entity.price))
                await session.commit()
        except Exception:
            logger.error(
                "Failed to create product in DB: id={id}",
                id=entity.id,
            )
            _track("create", "failed")
            raise

        logger.info(
            "Product successfully created in DB: id={id}",
            id=entity.id,
        )
        _track("create", "success")

    async def update(self, entity: Product) -> None:
        _track("update", "attempt")
        logger.info(
            "Attempt to update product with id={id}",
            id=entity.id,
        )
        try:
            async with self.session_factory() as session:
                await session.execute(
                    update(ProductModel)
                    .where(ProductModel.id == entity.id)
                    .values(name=entity.name, price=entity.price)
                )
                await session.commit()
        except Exception:
            logger.error(
                "Failed to update product in DB: id={id}",
                id=entity.id,
            )
            _track("update", "failed")
            raise

        logger.info(
            "Product successfully updated in DB: id={id}",
            id=entity.id,
        )
        _track("update", "success")

    async def find(self, id: str) -> Product:
        _track("get", "attempt")
        logger.info(
            "Request to get product from DB with id={id}",
            id=id,
        )
        try:
            async with self.session_factory() as session:
                row = (
                    await session.execute(select(ProductModel).where(ProductModel.id == id))
                ).scalar_one()
            product = Product(row.id, row.name, row.price)
        except Exception as exc:
            logger.warning(
                "Product not found in DB with id={id}",
                id=id,
            )
            _track("get", "not_found")
            raise ProductNotFoundError(id) from exc

        _track("get", "success")
        return product

    async def find_all(self) -> List[Product]:
        _track("list", "attempt")
        logger.info("Request to get all products from DB")
        try:
            async with self.session_factory() as session:
                rows = (await session.execute(select(ProductModel))).scalars().all()
        except Exception:
            _track("list", "failed")
            raise

        logger.info(
            "Products list retrieved from DB, count={count}",
            count=len(rows),
        )
        _track("list", "success")
        return [Product(row.id, row.name, row.price) for row in rows]
