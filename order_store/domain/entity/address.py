from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    street: str
    number: int
    zipcode: str
    city: str

    def __post_init__(self) -> None:
        if not self.street:
            raise ValueError("Street is required")
        if not self.number or self.number <= 0:
            raise ValueError("Number is required")
        if not self.zipcode:
            raise ValueError("Zip is required")
        if not self.city:
            raise ValueError("City is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zipcode} {self.city}"
