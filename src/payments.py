"""Payment adapters used when a product is bought."""
from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class PaymentAdapter(Protocol):
    def process_payment(self, amount: float, details: str = "") -> None:  # pragma: no cover - demo stub
        ...


def mask_details(details: str) -> str:
    """Hide all but the last four characters of an email or card number."""
    details = details.strip()
    if len(details) <= 4:
        return "*" * len(details)
    return "*" * (len(details) - 4) + details[-4:]


class CreditCardPaymentAdapter:
    """Stand-in for a card processor: confirms the charge and nothing else."""

    def process_payment(self, amount: float, details: str = "") -> None:
        if amount < 0:
            raise ValueError(f"Payment amount must not be negative: {amount}")
        print(f"Processing credit card payment of ${amount}")
        logger.info("Processed card payment of %s for %s", amount, mask_details(details) or "<none>")
