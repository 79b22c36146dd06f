"""Checkout error kinds.

Every kind is a recoverable condition. The checkout entry point turns the
first one it meets into an ``Error: <message>`` outcome instead of raising.
"""

from __future__ import annotations

from decimal import Decimal

from shopfront.utils.formatters import plain_number


class CheckoutError(Exception):
    """Base class for all checkout and reservation failures."""

    @property
    def message(self) -> str:
        return str(self)


class EmptyCartError(CheckoutError):
    def __init__(self) -> None:
        super().__init__("Cart is empty")


class CartClosedError(CheckoutError):
    def __init__(self) -> None:
        super().__init__("Cart has already been checked out")


class ExpiredItemError(CheckoutError):
    """Raised at reservation time, and reported again when an item expires before checkout."""

    def __init__(self, item_name: str, at_checkout: bool = False) -> None:
        self.item_name = item_name
        self.at_checkout = at_checkout
        if at_checkout:
            text = f"Product expired: {item_name}"
        else:
            text = f"Cannot add expired product: {item_name}"
        super().__init__(text)


class InsufficientStockError(CheckoutError):
    def __init__(self, item_name: str, available: int, requested: int) -> None:
        self.item_name = item_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient quantity for product: {item_name}. "
            f"Available: {available}, Requested: {requested}"
        )


class OutOfStockError(CheckoutError):
    def __init__(self, item_name: str) -> None:
        self.item_name = item_name
        super().__init__(f"Product out of stock: {item_name}")


class InsufficientBalanceError(CheckoutError):
    def __init__(self, customer_name: str, required: Decimal, available: Decimal) -> None:
        self.customer_name = customer_name
        self.required = required
        self.available = available
        super().__init__(
            f"Customer's balance is insufficient. Required: {plain_number(required)}, "
            f"Available: {plain_number(available)}"
        )
