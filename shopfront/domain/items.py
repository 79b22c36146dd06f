"""Purchasable goods.

All variants share one dataclass tagged with ``ItemKind``. Shippability is the
presence of ``shipping_weight_kg``: an item without a weight is never part of
a shipment even when ``requires_shipping()`` says True.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from shopfront.utils.validators import to_decimal


class ItemKind(str, Enum):
    PERISHABLE = "perishable"
    NON_PERISHABLE = "non_perishable"
    SHIPPABLE = "shippable"


@dataclass(eq=False)
class Item:
    name: str
    unit_price: Decimal
    available_quantity: int
    kind: ItemKind
    expiry_date: Optional[date] = None
    shipping_weight_kg: Optional[Decimal] = None
    needs_shipping: bool = False  # only consulted for NON_PERISHABLE

    def __post_init__(self) -> None:
        self.unit_price = to_decimal(self.unit_price)
        if self.shipping_weight_kg is not None:
            self.shipping_weight_kg = to_decimal(self.shipping_weight_kg)

    def is_expired(self, today: Optional[date] = None) -> bool:
        if self.kind is ItemKind.NON_PERISHABLE or self.expiry_date is None:
            return False
        today = today or date.today()
        return today > self.expiry_date

    def requires_shipping(self) -> bool:
        if self.kind is ItemKind.NON_PERISHABLE:
            return self.needs_shipping
        return True

    @property
    def is_shippable(self) -> bool:
        return self.shipping_weight_kg is not None

    def shipping_weight(self) -> Decimal:
        if self.shipping_weight_kg is None:
            raise ValueError(f"{self.name} has no shipping weight")
        return self.shipping_weight_kg


# catalog helpers

def perishable(
    name: str,
    price: Decimal | int | float | str,
    quantity: int,
    expiry_date: date,
    weight_kg: Decimal | float | str | None = None,
) -> Item:
    return Item(
        name=name,
        unit_price=price,
        available_quantity=quantity,
        kind=ItemKind.PERISHABLE,
        expiry_date=expiry_date,
        shipping_weight_kg=weight_kg,
    )


def non_perishable(
    name: str,
    price: Decimal | int | float | str,
    quantity: int,
    needs_shipping: bool = False,
    weight_kg: Decimal | float | str | None = None,
) -> Item:
    return Item(
        name=name,
        unit_price=price,
        available_quantity=quantity,
        kind=ItemKind.NON_PERISHABLE,
        shipping_weight_kg=weight_kg,
        needs_shipping=needs_shipping,
    )


def shippable(
    name: str,
    price: Decimal | int | float | str,
    quantity: int,
    weight_kg: Decimal | float | str,
    expiry_date: Optional[date] = None,
) -> Item:
    return Item(
        name=name,
        unit_price=price,
        available_quantity=quantity,
        kind=ItemKind.SHIPPABLE,
        expiry_date=expiry_date,
        shipping_weight_kg=weight_kg,
    )
