"""Sales history: lookups, best sellers and price calculation."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from os import PathLike
from typing import Union

from .models import Transaction
from .storage import TRANSACTIONS_FILE, load_transactions

PathArg = Union[str, "PathLike[str]"]

DISCOUNT_THRESHOLD = 10
DISCOUNT_FACTOR = 0.9


@dataclass
class TransactionService:
    """The recorded sales and the id the next one will get."""

    records: list[Transaction] = field(default_factory=list)
    next_id: int = 1
    path: PathArg = TRANSACTIONS_FILE

    @classmethod
    def load(cls, path: PathArg = TRANSACTIONS_FILE) -> TransactionService:
        """Load the history, starting empty if the file is missing or unreadable."""
        try:
            records = load_transactions(path)
        except (OSError, ValueError, KeyError, TypeError):
            return cls(records=[], next_id=1, path=path)
        next_id = records[-1].id + 1 if records else 1
        return cls(records=records, next_id=next_id, path=path)

    def by_date(self, day: date) -> list[Transaction]:
        """Transactions made on ``day``."""
        return [tx for tx in self.records if tx.timestamp.date() == day]

    def top_selling(self) -> list[tuple[str, int]]:
        """Item names with total quantity sold, best sellers first."""
        totals: Counter[str] = Counter()
        for tx in self.records:
            totals[tx.item_name] += tx.quantity
        return sorted(totals.items(), key=lambda entry: entry[1], reverse=True)

    def calculate_total_price(self, price_per_item: float, quantity: int) -> float:
        """Price for ``quantity`` units, 10% off above the discount threshold."""
        total = price_per_item * quantity
        if quantity > DISCOUNT_THRESHOLD:
            return total * DISCOUNT_FACTOR
        return total