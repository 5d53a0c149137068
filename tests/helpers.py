"""Test doubles and small helpers shared across test modules."""
from typing import Callable, List


class RecordingObserver:
    def __init__(self) -> None:
        self.seen: List[str] = []

    def update(self, product) -> None:
        self.seen.append(product.name)


class RecordingPayments:
    def __init__(self) -> None:
        self.charges: List[tuple] = []

    def process_payment(self, amount: float, details: str = "") -> None:
        self.charges.append((amount, details))


def scripted(*answers: str) -> Callable[[], str]:
    """Console reader that replays answers, then behaves like a closed stdin."""
    pending = list(answers)

    def read() -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read
