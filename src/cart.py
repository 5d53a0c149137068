"""Shopping cart holding product quantities and product listeners."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional

from catalog import Product
from notifications import ProductObserver
from pricing import CartLine, PricingBreakdown, PricingService, subtotal, total_weight
from shipping import ShippingStrategy

logger = logging.getLogger(__name__)


@dataclass
class Receipt:
    lines: List[CartLine]
    pricing: PricingBreakdown
    shipping_method: str


class ShoppingCart:
    """Product -> quantity mapping with observers notified on product picks.

    ``instance()`` hands out one lazily created process-wide cart. Code that
    can be given a cart explicitly should take one instead.
    """

    _instance: ClassVar[Optional["ShoppingCart"]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, pricing: Optional[PricingService] = None) -> None:
        self._products: Dict[Product, int] = {}
        self._observers: List[ProductObserver] = []
        self._pricing = pricing or PricingService()

    @classmethod
    def instance(cls) -> "ShoppingCart":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None

    def add_product(self, product: Product) -> None:
        self._products[product] = self._products.get(product, 0) + 1
        logger.debug("Cart now holds %d x %s", self._products[product], product.name)

    def quantity_of(self, product: Product) -> int:
        return self._products.get(product, 0)

    def lines(self) -> List[CartLine]:
        return list(self._products.items())

    def is_empty(self) -> bool:
        return not self._products

    def add_observer(self, observer: ProductObserver) -> None:
        # Duplicates are kept; each registration gets its own notification.
        self._observers.append(observer)

    def observers(self) -> List[ProductObserver]:
        return list(self._observers)

    def notify_observers(self, product: Product) -> None:
        for observer in list(self._observers):
            observer.update(product)

    def total_weight(self) -> float:
        return total_weight(self.lines())

    def total_cost(self) -> float:
        return subtotal(self.lines())

    def checkout(self, strategy: ShippingStrategy) -> Receipt:
        """Price the current lines; the cart is left untouched."""
        lines = self.lines()
        pricing = self._pricing.calculate(lines, strategy)
        logger.info(
            "Checkout with %s shipping: %d line(s), total %s",
            strategy.name,
            len(lines),
            pricing.total,
        )
        return Receipt(lines=lines, pricing=pricing, shipping_method=strategy.name)

    def clear(self) -> None:
        self._products.clear()
