"""Fixed product catalog looked up by menu number."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Product:
    product_id: int
    name: str
    price: float
    weight_kg: float


class ProductKind(Enum):
    LAPTOP = 1
    SMARTPHONE = 2
    TV = 3


class ProductNotFoundError(KeyError):
    def __init__(self, product_id: int) -> None:
        super().__init__(product_id)
        self.product_id = product_id

    def __str__(self) -> str:
        return f"Unknown product: {self.product_id}"


# name, price, weight in kg
PRODUCT_TABLE: Dict[ProductKind, Tuple[str, float, float]] = {
    ProductKind.LAPTOP: ("Laptop", 800.0, 2.5),
    ProductKind.SMARTPHONE: ("Smartphone", 400.0, 0.5),
    ProductKind.TV: ("TV", 1000.0, 10.0),
}


class CatalogService:
    def __init__(self, products: Optional[Dict[int, Product]] = None) -> None:
        self._products: Dict[int, Product] = products or {
            kind.value: Product(product_id=kind.value, name=name, price=price, weight_kg=weight)
            for kind, (name, price, weight) in PRODUCT_TABLE.items()
        }

    def find(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def get(self, product_id: int) -> Product:
        product = self.find(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def products(self) -> List[Product]:
        return [self._products[key] for key in sorted(self._products)]
