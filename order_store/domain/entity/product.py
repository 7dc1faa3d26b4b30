from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from order_store.domain.entity.money import money


@dataclass
class Product:
    id: str
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        self.price = money(self.price)
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValueError("Id is required")
        if not self.name:
            raise ValueError("Name is required")
        if self.price < 0:
            raise ValueError("Price must be greater than or equal to zero")

    def change_name(self, name: str) -> None:
        self.name = name
        self.validate()

    def change_price(self, price: Decimal) -> None:
        self.price = money(price)
        self.validate()
