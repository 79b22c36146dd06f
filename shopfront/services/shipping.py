from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Tuple

from shopfront.constants import GRAMS_PER_KG, SHIPPING_RATE_PER_KG


@dataclass(frozen=True)
class ShippableUnit:
    """One physical unit on its way to the customer."""
    name: str
    weight_kg: Decimal


class ShippingCalculator:
    def __init__(self, rate_per_kg: Decimal = SHIPPING_RATE_PER_KG) -> None:
        self.rate_per_kg = rate_per_kg

    def total_weight(self, units: Iterable[ShippableUnit]) -> Decimal:
        return sum((u.weight_kg for u in units), Decimal("0"))

    def fee(self, units: Iterable[ShippableUnit]) -> Decimal:
        return self.total_weight(units) * self.rate_per_kg

    def shipment_manifest(self, units: Iterable[ShippableUnit]) -> List[Tuple[str, Decimal]]:
        return [(u.name, u.weight_kg * GRAMS_PER_KG) for u in units]
