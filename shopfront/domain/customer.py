from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopfront.utils.validators import to_decimal


@dataclass(eq=False)
class Customer:
    name: str
    balance: Decimal

    def __post_init__(self) -> None:
        self.balance = to_decimal(self.balance)

    def can_afford(self, amount: Decimal) -> bool:
        return self.balance >= amount

    def debit(self, amount: Decimal) -> None:
        # no sufficiency check here, the checkout settles only after can_afford()
        self.balance -= amount
