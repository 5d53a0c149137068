"""Pricing helpers for cart checkout."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from catalog import Product
from shipping import ShippingStrategy

CartLine = Tuple[Product, int]


@dataclass
class PricingBreakdown:
    total_weight: float
    shipping: float
    subtotal: float
    total: float


def total_weight(lines: Iterable[CartLine]) -> float:
    return sum((product.weight_kg * quantity for product, quantity in lines), 0.0)


def subtotal(lines: Iterable[CartLine]) -> float:
    return sum((product.price * quantity for product, quantity in lines), 0.0)


class PricingService:
    """Totals a set of cart lines under the shipping policy picked at checkout."""

    def calculate(self, lines: Iterable[CartLine], strategy: ShippingStrategy) -> PricingBreakdown:
        lines = list(lines)
        weight = total_weight(lines)
        shipping = strategy.cost(weight)
        items = subtotal(lines)
        return PricingBreakdown(
            total_weight=weight,
            shipping=shipping,
            subtotal=items,
            total=items + shipping,
        )
