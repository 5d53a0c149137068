"""Priced add-ons that wrap a catalog product.

A decorator keeps the product's capabilities (``product_id``, ``name``,
``price``, ``weight_kg``) and overrides some of them, so a gift-wrapped,
insured laptop still prices, weighs and sits in the cart like any other
product. Decorators compose in any order.
"""
from __future__ import annotations

from catalog import Product


class ProductDecorator:
    def __init__(self, product: Product) -> None:
        self._product = product

    @property
    def wrapped(self) -> Product:
        return self._product

    @property
    def product_id(self) -> int:
        return self._product.product_id

    @property
    def name(self) -> str:
        return self._product.name

    @property
    def price(self) -> float:
        return self._product.price

    @property
    def weight_kg(self) -> float:
        return self._product.weight_kg

    def _key(self) -> tuple:
        return (type(self), self._product)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductDecorator):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._product!r})"


class GiftWrap(ProductDecorator):
    def __init__(self, product: Product, fee: float = 5.0, weight_kg: float = 0.1) -> None:
        if fee < 0 or weight_kg < 0:
            raise ValueError("Gift wrap fee and weight must not be negative")
        super().__init__(product)
        self.fee = fee
        self.extra_weight_kg = weight_kg

    @property
    def name(self) -> str:
        return f"{self._product.name} + gift wrap"

    @property
    def price(self) -> float:
        return self._product.price + self.fee

    @property
    def weight_kg(self) -> float:
        return self._product.weight_kg + self.extra_weight_kg

    def _key(self) -> tuple:
        return (type(self), self._product, self.fee, self.extra_weight_kg)


class Insurance(ProductDecorator):
    """Transit insurance charged as a share of the wrapped price."""

    def __init__(self, product: Product, rate: float = 0.05) -> None:
        if rate < 0:
            raise ValueError(f"Insurance rate must not be negative: {rate}")
        super().__init__(product)
        self.rate = rate

    @property
    def name(self) -> str:
        return f"{self._product.name} + insurance"

    @property
    def price(self) -> float:
        return self._product.price + self._product.price * self.rate

    def _key(self) -> tuple:
        return (type(self), self._product, self.rate)
