from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from order_store.models.base import Base, money, strpk


class OrderItem(Base):
    __tablename__ = "order_items"

    id: Mapped[strpk]
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[money]
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    order_id: Mapped[str] = mapped_column(ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id: Mapped[str] = mapped_column(ForeignKey("products.id"), nullable=False)

    order: Mapped["Order"] = relationship(back_populates="items")
