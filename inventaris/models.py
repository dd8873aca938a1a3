"""Data records: stock items, sales transactions and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _parse_timestamp(text: str) -> datetime:
    base, _, fraction = text.partition(".")
    moment = datetime.strptime(base, _TIMESTAMP_FORMAT)
    if fraction:
        if not fraction.isdigit():
            raise ValueError(f"invalid timestamp: {text!r}")
        moment = moment.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    return moment


@dataclass
class Item:
    """An item held in stock."""

    id: int
    name: str
    stock: int
    price: float

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "stock": self.stock, "price": self.price}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            stock=int(data["stock"]),
            price=float(data["price"]),
        )


@dataclass
class Transaction:
    """A completed sale of one item."""

    id: int
    item_id: int
    item_name: str
    quantity: int
    total_price: float
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(
        cls, id: int, item_id: int, item_name: str, quantity: int, total_price: float
    ) -> Transaction:
        """Record a sale stamped with the current local time."""
        return cls(id, item_id, item_name, quantity, total_price, datetime.now())

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "item_id": self.item_id,
            "item_name": self.item_name,
            "quantity": self.quantity,
            "total_price": self.total_price,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Transaction:
        return cls(
            id=int(data["id"]),
            item_id=int(data["item_id"]),
            item_name=str(data["item_name"]),
            quantity=int(data["quantity"]),
            total_price=float(data["total_price"]),
            timestamp=_parse_timestamp(str(data["timestamp"])),
        )


class Role(Enum):
    """What a user may do."""

    ADMIN = "admin"
    KASIR = "kasir"

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass
class User:
    """A person who can log in."""

    id: int
    username: str
    password: str
    role: Role