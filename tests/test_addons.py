"""Tests for product add-on decorators."""
import pytest

from addons import GiftWrap, Insurance
from cart import ShoppingCart
from shipping import StandardShipping


def test_gift_wrap_adds_fee_and_weight(laptop):
    wrapped = GiftWrap(laptop)
    assert wrapped.name == "Laptop + gift wrap"
    assert wrapped.price == 805.0
    assert wrapped.weight_kg == pytest.approx(2.6)
    assert wrapped.product_id == 1
    assert wrapped.wrapped is laptop


def test_insurance_charges_share_of_price(laptop):
    insured = Insurance(laptop, rate=0.05)
    assert insured.name == "Laptop + insurance"
    assert insured.price == 840.0
    assert insured.weight_kg == 2.5


def test_decorators_compose(tv):
    product = Insurance(GiftWrap(tv, fee=10.0, weight_kg=0.5), rate=0.1)
    assert product.name == "TV + gift wrap + insurance"
    assert product.price == pytest.approx(1111.0)
    assert product.weight_kg == 10.5


def test_equal_wrappers_merge_in_cart(laptop):
    cart = ShoppingCart()
    cart.add_product(GiftWrap(laptop))
    cart.add_product(GiftWrap(laptop))
    cart.add_product(laptop)
    assert cart.quantity_of(GiftWrap(laptop)) == 2
    assert cart.quantity_of(laptop) == 1
    assert GiftWrap(laptop) != Insurance(laptop)


def test_decorated_products_price_at_checkout(smartphone):
    cart = ShoppingCart()
    cart.add_product(GiftWrap(smartphone, fee=5.0, weight_kg=0.5))
    receipt = cart.checkout(StandardShipping())
    assert receipt.pricing.subtotal == 405.0
    assert receipt.pricing.total_weight == 1.0
    assert receipt.pricing.total == 405.5


@pytest.mark.parametrize("factory", [lambda p: GiftWrap(p, fee=-1.0), lambda p: Insurance(p, rate=-0.1)])
def test_negative_add_ons_rejected(laptop, factory):
    with pytest.raises(ValueError):
        factory(laptop)
