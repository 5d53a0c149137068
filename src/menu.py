#!/usr/bin/env python3
"""
Interactive console shop.

Pick products (each one is paid for on the spot), then check out with
standard or express shipping and give a delivery address.

Env:
  SHOP_LOG_LEVEL     logging level (default WARNING)
  SHOP_EMAIL_SENDER  sender shown on product emails
Both may also live in a .env file.
"""
from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from catalog import ProductNotFoundError
from receipts import format_receipt
from session import ShopSession, build_session
from settings import configure_logging, load_settings
from shipping import strategy_for_choice

logger = logging.getLogger(__name__)

ADD_PRODUCT, CHECKOUT, EXIT = 1, 2, 3


class ShopConsole:
    def __init__(
        self,
        session: ShopSession,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._session = session
        self._read = read
        self._write = write

    def run(self) -> int:
        while True:
            self._write("Select an option:")
            self._write("1. Add a product to the cart")
            self._write("2. View cart and checkout")
            self._write("3. Exit")

            choice = self._read_int()
            if choice == ADD_PRODUCT:
                self.add_product_to_cart()
            elif choice == CHECKOUT:
                self.checkout()
            elif choice == EXIT:
                self._write("Exiting the application. Goodbye!")
                return 0
            else:
                self._write("Invalid choice. Please enter a valid option.")

    def add_product_to_cart(self) -> None:
        self._write("Select a product by entering its number:")
        for product in self._session.catalog.products():
            self._write(f"{product.product_id}. {product.name}")

        product_number = self._read_int()
        try:
            product = self._session.select_product(product_number)
        except ProductNotFoundError:
            self._write("Invalid product number. Please select a valid product.")
            return

        self._write(f"Selected product: {product.name}")
        self._write(f"Price: ${product.price}")
        self._write("Enter your email or card number for payment: ")
        payment_details = self._read_line()
        self._session.purchase(product, payment_details)

    def checkout(self) -> None:
        self._write("Select shipping strategy (1 for Standard, 2 for Express): ")
        strategy = strategy_for_choice(self._read_int())

        receipt = self._session.checkout(strategy)
        self._write(format_receipt(receipt))

        self._write("Enter delivery address: ")
        address = self._read_line()
        self._write(self._session.schedule_delivery(address))

    def _read_line(self) -> str:
        try:
            return self._read()
        except EOFError:
            raise SystemExit("Input ended unexpectedly") from None

    def _read_int(self) -> int:
        raw = self._read_line()
        try:
            return int(raw.strip())
        except ValueError:
            logger.error("Expected a number, got %r", raw)
            raise SystemExit(f"Expected a number, got: {raw!r}") from None


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--log-level", default=None, help="Override SHOP_LOG_LEVEL")
    parser.add_argument("--sender", default=None, help="Override SHOP_EMAIL_SENDER")
    args = parser.parse_args(argv)

    settings = load_settings(log_level=args.log_level, email_sender=args.sender)
    try:
        configure_logging(settings)
    except ValueError as exc:
        raise SystemExit(str(exc)) from None

    console = ShopConsole(build_session(settings))
    return console.run()


if __name__ == "__main__":
    raise SystemExit(main())
