from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from order_store.models.base import Base, money, strpk


class Product(Base):
    __tablename__ = "products"

    id: Mapped[strpk]
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[money]
