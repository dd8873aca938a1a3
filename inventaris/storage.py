"""JSON files holding the inventory and the transaction history."""

from __future__ import annotations

import json
from collections.abc import Iterable
from os import PathLike
from pathlib import Path
from typing import Any, Union

from .models import Item, Transaction

ITEMS_FILE = "items.json"
TRANSACTIONS_FILE = "transaction.json"

PathArg = Union[str, "PathLike[str]"]


def _write(path: PathArg, records: list[dict[str, Any]]) -> None:
    text = json.dumps(records, ensure_ascii=False, separators=(",", ":"))
    Path(path).write_text(text, encoding="utf-8")


def _read(path: PathArg) -> list[dict[str, Any]]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array")
    return data


def save_items(items: Iterable[Item], path: PathArg = ITEMS_FILE) -> None:
    """Write the whole inventory to ``path``."""
    _write(path, [item.to_dict() for item in items])


def load_items(path: PathArg = ITEMS_FILE) -> list[Item]:
    """Read the inventory from ``path``."""
    return [Item.from_dict(entry) for entry in _read(path)]


def save_transactions(transactions: Iterable[Transaction], path: PathArg = TRANSACTIONS_FILE) -> None:
    """Write transactions to ``path``, replacing what was there."""
    _write(path, [tx.to_dict() for tx in transactions])


def load_transactions(path: PathArg = TRANSACTIONS_FILE) -> list[Transaction]:
    """Read transactions from ``path``."""
    return [Transaction.from_dict(entry) for entry in _read(path)]