from typing import List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from order_store.models.base import Base, money, strpk


class Order(Base):
    __tablename__ = "orders"

    id: Mapped[strpk]
    customer_id: Mapped[str] = mapped_column(String(64), nullable=False)
    total: Mapped[money]

    items: Mapped[List["OrderItem"]] = relationship(
        back_populates="order",
        order_by="OrderItem.position",
        cascade="all, delete-orphan",
    )
