"""Shared fixtures for the shop tests."""
import pytest

from audit import AuditLogger
from cart import ShoppingCart
from catalog import CatalogService
from helpers import RecordingObserver, RecordingPayments
from notifications import EmailProductObserver
from payments import CreditCardPaymentAdapter
from session import ShopSession


@pytest.fixture
def catalog():
    return CatalogService()


@pytest.fixture
def laptop(catalog):
    return catalog.get(1)


@pytest.fixture
def smartphone(catalog):
    return catalog.get(2)


@pytest.fixture
def tv(catalog):
    return catalog.get(3)


@pytest.fixture
def cart():
    return ShoppingCart()


@pytest.fixture
def recorder():
    return RecordingObserver()


@pytest.fixture
def payments():
    return RecordingPayments()


@pytest.fixture
def session(catalog, cart, payments, recorder):
    return ShopSession(
        catalog=catalog,
        cart=cart,
        payments=payments,
        audit=AuditLogger(),
        observers=[recorder],
    )


@pytest.fixture
def live_session(catalog, cart):
    """Session wired with the real card adapter and email observer."""
    return ShopSession(
        catalog=catalog,
        cart=cart,
        payments=CreditCardPaymentAdapter(),
        audit=AuditLogger(),
        observers=[EmailProductObserver()],
    )


@pytest.fixture(autouse=True)
def reset_shared_cart():
    ShoppingCart.reset_instance()
    yield
    ShoppingCart.reset_instance()
