from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from order_store.domain.entity.money import money


@dataclass
class OrderItem:
    id: str
    name: str
    product_id: str
    price: Decimal
    quantity: int

    def __post_init__(self) -> None:
        self.price = money(self.price)
        if self.price < 0:
            raise ValueError("Price must be greater than or equal to zero")

    def order_item_total(self) -> Decimal:
        return self.price * self.quantity
