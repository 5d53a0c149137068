"""Receipt text shown after checkout."""
from __future__ import annotations

from typing import List

from cart import Receipt


def format_receipt(receipt: Receipt) -> str:
    """Render the cart listing followed by weight, shipping and total lines."""
    rows: List[str] = ["Items in the cart:"]
    for product, quantity in receipt.lines:
        rows.append(f"{product.name} - ${product.price} x {quantity}")

    pricing = receipt.pricing
    rows.append(f"Total weight: {pricing.total_weight} kg")
    rows.append(f"Shipping cost: ${pricing.shipping}")
    rows.append(f"Total cost: ${pricing.total}")
    return "\n".join(rows)
