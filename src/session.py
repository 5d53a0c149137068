"""Shop session tying the cart to catalog, payment and notification services."""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from audit import AuditLogger
from cart import Receipt, ShoppingCart
from catalog import CatalogService, Product, ProductNotFoundError
from notifications import EmailProductObserver, ProductObserver
from payments import CreditCardPaymentAdapter, PaymentAdapter
from pricing import PricingService
from settings import ShopSettings
from shipping import ShippingStrategy

logger = logging.getLogger(__name__)


class ShopSession:
    """Coordinates product selection, payment, checkout and delivery.

    The session owns the one cart used for the life of the program and
    registers the product observers on it once, at construction.
    """

    def __init__(
        self,
        catalog: CatalogService,
        cart: ShoppingCart,
        payments: PaymentAdapter,
        audit: AuditLogger,
        observers: Iterable[ProductObserver] = (),
    ) -> None:
        self._catalog = catalog
        self._cart = cart
        self._payments = payments
        self._audit = audit
        for observer in observers:
            self._cart.add_observer(observer)

    @property
    def catalog(self) -> CatalogService:
        return self._catalog

    @property
    def cart(self) -> ShoppingCart:
        return self._cart

    @property
    def audit(self) -> AuditLogger:
        return self._audit

    def select_product(self, product_id: int) -> Product:
        try:
            return self._catalog.get(product_id)
        except ProductNotFoundError as exc:
            self._audit.log("product_rejected", None, str(exc))
            logger.info("Rejected product number %s", product_id)
            raise

    def purchase(self, product: Product, payment_details: str = "") -> None:
        """Charge the unit price, tell the observers, then add one to the cart."""
        self._payments.process_payment(product.price, payment_details)
        self._audit.log("payment_processed", product.name, f"amount={product.price}")

        self._cart.notify_observers(product)
        self._cart.add_product(product)
        self._audit.log(
            "product_added",
            product.name,
            f"quantity={self._cart.quantity_of(product)}",
        )

    def checkout(self, strategy: ShippingStrategy) -> Receipt:
        receipt = self._cart.checkout(strategy)
        self._audit.log(
            "checkout",
            None,
            f"shipping={strategy.name}, total={receipt.pricing.total}",
        )
        return receipt

    def schedule_delivery(self, address: str) -> str:
        """Confirm the delivery address and empty the cart for the next order."""
        self._audit.log("delivery_scheduled", None, address)
        self._cart.clear()
        self._audit.log("cart_cleared", None, "after delivery")
        return f"Your order will be delivered to: {address}"


def build_session(settings: Optional[ShopSettings] = None, cart: Optional[ShoppingCart] = None) -> ShopSession:
    settings = settings or ShopSettings()
    return ShopSession(
        catalog=CatalogService(),
        cart=cart or ShoppingCart(PricingService()),
        payments=CreditCardPaymentAdapter(),
        audit=AuditLogger(),
        observers=[EmailProductObserver(sender=settings.email_sender)],
    )
