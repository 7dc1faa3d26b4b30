from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from order_store.domain.entity.order_item import OrderItem


@dataclass
class Order:
    """Order aggregate root.

    Owns its items: they are persisted, replaced and loaded together with
    the order. The total is never stored on the object, it is always
    recomputed from the current items.
    """

    id: str
    customer_id: str
    items: List[OrderItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValueError("Id is required")
        if not self.customer_id:
            raise ValueError("CustomerId is required")
        if not self.items:
            raise ValueError("Items are required")
        if any(item.quantity <= 0 for item in self.items):
            raise ValueError("Quantity must be greater than 0")

    def add_item(self, item: OrderItem) -> None:
        self.items.append(item)
        self.validate()

    def total(self) -> Decimal:
        return sum((item.order_item_total() for item in self.items), Decimal("0"))
