"""Tests for receipt formatting."""
from receipts import format_receipt
from shipping import ExpressShipping, StandardShipping


def test_laptop_and_tv_receipt(cart, laptop, tv):
    cart.add_product(laptop)
    cart.add_product(tv)
    text = format_receipt(cart.checkout(StandardShipping()))
    assert text.splitlines() == [
        "Items in the cart:",
        "Laptop - $800.0 x 1",
        "TV - $1000.0 x 1",
        "Total weight: 12.5 kg",
        "Shipping cost: $6.25",
        "Total cost: $1806.25",
    ]


def test_empty_cart_receipt(cart):
    text = format_receipt(cart.checkout(ExpressShipping()))
    assert text.splitlines() == [
        "Items in the cart:",
        "Total weight: 0.0 kg",
        "Shipping cost: $0.0",
        "Total cost: $0.0",
    ]
