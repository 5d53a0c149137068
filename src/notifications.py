"""Product listeners notified when a customer picks a product."""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Protocol

from catalog import Product

logger = logging.getLogger(__name__)

DEFAULT_SENDER = "noreply@example.com"
SENT_HISTORY = 100


class ProductObserver(Protocol):
    def update(self, product: Product) -> None:
        ...


class EmailProductObserver:
    def __init__(self, sender: str = DEFAULT_SENDER, history: int = SENT_HISTORY) -> None:
        self.sender = sender
        # most recent product names mailed, oldest dropped first
        self.sent: Deque[str] = deque(maxlen=history)

    def update(self, product: Product) -> None:
        print(f"[{self.sender}] Sending product update email for: {product.name}")
        self.sent.append(product.name)
        logger.debug("Queued product email for %s from %s", product.name, self.sender)
