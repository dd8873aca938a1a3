"""Stock keeping: items, prices and persistence to disk."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from decimal import Decimal
from os import PathLike
from typing import Optional, Union

from .errors import InsufficientStockError, ItemNotFoundError, SaveError
from .models import Item
from .storage import ITEMS_FILE, load_items, save_items

PathArg = Union[str, "PathLike[str]"]


def _plain_number(value: float) -> str:
    """Shortest decimal text for ``value``, never in exponent form."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        text = str(int(value))
        return "-0" if value == 0 and math.copysign(1.0, value) < 0 else text
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def format_price(price: float) -> str:
    """Group the digits of ``price`` in threes with dots, counting from the right."""
    text = _plain_number(float(price))
    if len(text) <= 3:
        return text
    cuts = sorted(range(len(text) - 3, 0, -3))
    parts = [text[start:end] for start, end in zip([0, *cuts], [*cuts, len(text)])]
    return ".".join(parts)


@dataclass
class InventoryService:
    """The list of items on sale, saved to a JSON file after every change."""

    items: list[Item] = field(default_factory=list)
    next_id: int = 1
    path: PathArg = ITEMS_FILE

    @classmethod
    def load(cls, path: PathArg = ITEMS_FILE) -> InventoryService:
        """Load the inventory, starting empty if the file is missing or unreadable."""
        try:
            items = load_items(path)
        except (OSError, ValueError, KeyError, TypeError):
            return cls(items=[], next_id=1, path=path)
        next_id = items[-1].id + 1 if items else 1
        return cls(items=items, next_id=next_id, path=path)

    def _save(self) -> None:
        try:
            save_items(self.items, self.path)
        except OSError as exc:
            raise SaveError() from exc

    def _position(self, item_id: int) -> Optional[int]:
        for position, item in enumerate(self.items):
            if item.id == item_id:
                return position
        print("\n   [ERROR] Nomor barang tidak valid!")
        return None

    def find(self, item_id: int) -> Optional[Item]:
        """Return the item with ``item_id``, if any."""
        return next((item for item in self.items if item.id == item_id), None)

    def add_item(self, name: str, stock: int, price: float) -> Item:
        """Add a new item under the next free id and save."""
        item = Item(id=self.next_id, name=name, stock=stock, price=price)
        self.items.append(item)
        self.next_id += 1
        self._save()
        return item

    def reduce_stock(self, item_id: int, quantity: int) -> None:
        """Take ``quantity`` units of an item out of stock and save."""
        item = self.find(item_id)
        if item is None:
            raise ItemNotFoundError()
        if item.stock < quantity:
            raise InsufficientStockError()
        item.stock -= quantity
        print("Stok barang berhasil dikurangi.")
        self._save()

    def delete_item(self, item_id: int) -> bool:
        """Remove an item; return whether it existed."""
        position = self._position(item_id)
        if position is None:
            return False
        del self.items[position]
        print("\n [SUCCESS] Barang berhasil di hapus.")
        self._save_quietly()
        return True

    def update_item(self, item_id: int, name: str, stock: int, price: float) -> bool:
        """Replace an item's name, stock and price; return whether it existed."""
        position = self._position(item_id)
        if position is None:
            return False
        item = self.items[position]
        item.name, item.stock, item.price = name, stock, price
        print("\n [SUCCESS] Barang berhasil di update.")
        self._save_quietly()
        return True

    def update_stock(self, item_id: int, stock: int) -> bool:
        """Set an item's stock; return whether it existed."""
        position = self._position(item_id)
        if position is None:
            return False
        self.items[position].stock = stock
        print("\n [SUCCESS] Stok barang berhasil di update.")
        self._save_quietly()
        return True

    def search(self, name: str) -> list[Item]:
        """Copies of the items whose name contains ``name``, ignoring case."""
        needle = name.lower()
        return [dataclasses.replace(item) for item in self.items if needle in item.name.lower()]

    def _save_quietly(self) -> None:
        try:
            self._save()
        except SaveError:
            pass