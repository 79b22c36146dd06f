"""Checkout pipeline.

One attempt walks START -> VALIDATED -> PRICED -> SETTLED -> REPORTED and stops
at FAILED on the first error. Each gate returns an error kind instead of
raising; ``checkout`` never lets one escape.

Reservations made while filling the cart stay in place when a checkout fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from shopfront.constants import (
    ERROR_PREFIX,
    RECEIPT_FOOTER,
    RECEIPT_HEADER,
    RECEIPT_SEPARATOR,
    SHIPMENT_HEADER,
)
from shopfront.domain.cart import Cart, CartLine
from shopfront.domain.customer import Customer
from shopfront.domain.errors import (
    CartClosedError,
    CheckoutError,
    EmptyCartError,
    ExpiredItemError,
    InsufficientBalanceError,
    OutOfStockError,
)
from shopfront.services.shipping import ShippableUnit, ShippingCalculator
from shopfront.utils.formatters import plain_number, truncate

logger = logging.getLogger(__name__)


class CheckoutState(str, Enum):
    START = "start"
    VALIDATED = "validated"
    PRICED = "priced"
    SETTLED = "settled"
    REPORTED = "reported"
    FAILED = "failed"


@dataclass
class CheckoutResult:
    state: CheckoutState = CheckoutState.START
    lines: List[CartLine] = field(default_factory=list)
    units: List[ShippableUnit] = field(default_factory=list)
    subtotal: Decimal = Decimal("0")
    shipping_fee: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    balance_after: Optional[Decimal] = None
    shipment_notice: List[str] = field(default_factory=list)
    receipt: List[str] = field(default_factory=list)
    error: Optional[CheckoutError] = None

    @property
    def ok(self) -> bool:
        return self.state is CheckoutState.REPORTED

    @property
    def total_weight_kg(self) -> Decimal:
        return sum((u.weight_kg for u in self.units), Decimal("0"))

    @property
    def output_lines(self) -> List[str]:
        if self.error is not None:
            return [f"{ERROR_PREFIX}{self.error}"]
        return self.shipment_notice + self.receipt

    @property
    def text(self) -> str:
        return "\n".join(self.output_lines)


class CheckoutProcessor:
    def __init__(self, shipping: Optional[ShippingCalculator] = None) -> None:
        self.shipping = shipping or ShippingCalculator()

    # gates

    def validate(self, cart: Cart, today: Optional[date] = None) -> Optional[CheckoutError]:
        if cart.closed:
            return CartClosedError()
        if cart.is_empty():
            return EmptyCartError()
        for line in cart.lines():
            item = line.item
            if item.is_expired(today):
                return ExpiredItemError(item.name, at_checkout=True)
            # reserve() keeps stock >= 0, so this only trips if someone edited the item by hand
            if item.available_quantity < 0:
                return OutOfStockError(item.name)
        return None

    def shippable_units(self, cart: Cart) -> List[ShippableUnit]:
        units: List[ShippableUnit] = []
        for line in cart.lines():
            item = line.item
            if item.requires_shipping() and item.is_shippable:
                weight = item.shipping_weight()
                units.extend(ShippableUnit(item.name, weight) for _ in range(line.reserved_quantity))
        return units

    def price(self, cart: Cart, result: CheckoutResult) -> None:
        result.lines = list(cart.lines())
        result.subtotal = cart.subtotal()
        result.units = self.shippable_units(cart)
        result.shipping_fee = self.shipping.fee(result.units)
        result.total = result.subtotal + result.shipping_fee

    def settle(self, customer: Customer, result: CheckoutResult) -> Optional[CheckoutError]:
        if not customer.can_afford(result.total):
            return InsufficientBalanceError(customer.name, result.total, customer.balance)
        customer.debit(result.total)
        result.balance_after = customer.balance
        return None

    # report

    def render_shipment_notice(self, units: List[ShippableUnit]) -> List[str]:
        if not units:
            return []
        out = [SHIPMENT_HEADER]
        for name, grams in self.shipping.shipment_manifest(units):
            out.append(f"1x {name} {plain_number(grams)}g")
        out.append(f"Total package weight {plain_number(self.shipping.total_weight(units))}kg")
        return out

    def render_receipt(self, result: CheckoutResult) -> List[str]:
        out = [RECEIPT_HEADER]
        for line in result.lines:
            out.append(f"{line.reserved_quantity}x {line.item.name} {truncate(line.line_total)}")
        out.append(RECEIPT_SEPARATOR)
        out.append(f"Subtotal {truncate(result.subtotal)}")
        out.append(f"Shipping {truncate(result.shipping_fee)}")
        out.append(f"Amount {truncate(result.total)}")
        out.append(f"Customer balance after payment: {plain_number(result.balance_after)}")
        out.append(RECEIPT_FOOTER)
        return out

    def _fail(self, result: CheckoutResult, err: CheckoutError) -> CheckoutResult:
        result.state = CheckoutState.FAILED
        result.error = err
        logger.warning(f"Checkout failed: {err}")
        return result

    def checkout(self, customer: Customer, cart: Cart, today: Optional[date] = None) -> CheckoutResult:
        result = CheckoutResult()

        err = self.validate(cart, today)
        if err is not None:
            return self._fail(result, err)
        result.state = CheckoutState.VALIDATED

        self.price(cart, result)
        result.state = CheckoutState.PRICED

        err = self.settle(customer, result)
        if err is not None:
            return self._fail(result, err)
        result.state = CheckoutState.SETTLED
        cart.close()
        logger.info(
            f"Charged {customer.name} {result.total} "
            f"(subtotal {result.subtotal}, shipping {result.shipping_fee}), balance now {customer.balance}"
        )

        result.shipment_notice = self.render_shipment_notice(result.units)
        result.receipt = self.render_receipt(result)
        result.state = CheckoutState.REPORTED
        return result


def checkout(customer: Customer, cart: Cart, today: Optional[date] = None) -> CheckoutResult:
    return CheckoutProcessor().checkout(customer, cart, today)
