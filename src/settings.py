"""Runtime settings read from the environment."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from notifications import DEFAULT_SENDER

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ShopSettings:
    log_level: str = DEFAULT_LOG_LEVEL
    email_sender: str = DEFAULT_SENDER

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return level


def load_settings(log_level: Optional[str] = None, email_sender: Optional[str] = None) -> ShopSettings:
    """Build settings from ``.env``/environment; explicit arguments win."""
    load_dotenv()
    return ShopSettings(
        log_level=log_level or os.getenv("SHOP_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        email_sender=email_sender or os.getenv("SHOP_EMAIL_SENDER") or DEFAULT_SENDER,
    )


def configure_logging(settings: ShopSettings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level_value)
