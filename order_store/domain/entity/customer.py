from __future__ import annotations

from dataclasses import dataclass

from order_store.domain.entity.address import Address


@dataclass
class Customer:
    """Customer aggregate.

    A customer can only be activated once it has an address; reward points
    only ever grow.
    """

    id: str
    name: str
    address: Address | None = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValueError("Id is required")
        if not self.name:
            raise ValueError("Name is required")

    def change_name(self, name: str) -> None:
        self.name = name
        self.validate()

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        if self.address is None:
            raise ValueError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def is_active(self) -> bool:
        return self.active

    def add_reward_points(self, points: int) -> None:
        if points < 0:
            raise ValueError("Reward points must be greater than or equal to zero")
        self.reward_points += points
