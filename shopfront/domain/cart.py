from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from shopfront.domain.errors import (
    CartClosedError,
    CheckoutError,
    ExpiredItemError,
    InsufficientStockError,
)
from shopfront.domain.items import Item
from shopfront.utils.validators import require_int, require_positive_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    item: Item
    reserved_quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.item.unit_price * self.reserved_quantity


@dataclass(eq=False)
class Cart:
    _lines: List[CartLine] = field(default_factory=list, init=False)
    closed: bool = field(default=False, init=False)

    def check(self, item: Item, quantity: int, today: Optional[date] = None) -> Optional[CheckoutError]:
        if self.closed:
            return CartClosedError()
        if item.is_expired(today):
            return ExpiredItemError(item.name)
        if quantity > item.available_quantity:
            return InsufficientStockError(item.name, item.available_quantity, quantity)
        return None

    def reserve(self, item: Item, quantity: int, today: Optional[date] = None) -> CartLine:
        """
        Reserve `quantity` units of `item`:
        - stock is taken from the item right away
        - nothing gives it back, neither a failed checkout nor a dropped cart
        """
        require_int(quantity, "quantity")
        require_positive_number(quantity, "quantity")

        err = self.check(item, quantity, today)
        if err is not None:
            logger.warning(f"Reservation rejected: {err}")
            raise err

        line = CartLine(item=item, reserved_quantity=quantity)
        self._lines.append(line)
        item.available_quantity -= quantity
        logger.info(f"Reserved {quantity}x {item.name} (left in stock: {item.available_quantity})")
        return line

    def is_empty(self) -> bool:
        return not self._lines

    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines)

    def subtotal(self) -> Decimal:
        return sum((line.line_total for line in self._lines), Decimal("0"))

    def close(self) -> None:
        self.closed = True
