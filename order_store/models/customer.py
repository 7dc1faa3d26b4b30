from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from order_store.models.base import Base, strpk


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[strpk]
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(32), nullable=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    reward_points: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
