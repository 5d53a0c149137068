"""Audit trail of shop session events, written through the module logger."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Deque, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_HISTORY = 500


@dataclass
class AuditEntry:
    event: str
    product: Optional[str]
    details: str
    at: datetime


class AuditLogger:
    """Logs each event at INFO and keeps the most recent ones for inspection."""

    def __init__(self, history: int = DEFAULT_HISTORY) -> None:
        self._entries: Deque[AuditEntry] = deque(maxlen=history)

    def log(self, event: str, product: Optional[str], details: str) -> None:
        entry = AuditEntry(
            event=event,
            product=product,
            details=details,
            at=datetime.now(timezone.utc),
        )
        self._entries.append(entry)
        logger.info("%s product=%s %s", entry.event, entry.product or "-", entry.details)

    def entries(self) -> List[AuditEntry]:
        return list(self._entries)

    def events(self) -> List[str]:
        return [entry.event for entry in self._entries]
