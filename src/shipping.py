"""Shipping policies priced by total parcel weight."""
from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class ShippingStrategy(Protocol):
    name: str

    def cost(self, weight_kg: float) -> float:
        ...


class _RateShipping:
    name = "base"
    rate_per_kg = 0.0

    def cost(self, weight_kg: float) -> float:
        if weight_kg < 0:
            raise ValueError(f"Weight must not be negative: {weight_kg}")
        return weight_kg * self.rate_per_kg


class StandardShipping(_RateShipping):
    name = "standard"
    rate_per_kg = 0.5


class ExpressShipping(_RateShipping):
    name = "express"
    rate_per_kg = 1.5


STANDARD_CHOICE = 1
EXPRESS_CHOICE = 2


def strategy_for_choice(choice: int) -> ShippingStrategy:
    """Map the checkout menu answer to a policy; anything but 1 ships express."""
    if choice == STANDARD_CHOICE:
        return StandardShipping()
    if choice != EXPRESS_CHOICE:
        logger.info("Shipping choice %s is not listed, falling back to express", choice)
    return ExpressShipping()
