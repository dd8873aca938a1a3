"""Console screens for managing the stock list."""

from __future__ import annotations

from typing import Optional

from .audit import AUDIT_FILE, PathArg, add_log
from .inputs import ask, parse_item_index, parse_name, parse_price, parse_stock
from .inventory import InventoryService, format_price
from .models import Item

LOW_STOCK = 5

NAME_PROMPT = "Masukan nama barang: "
STOCK_PROMPT = "Masukan stok barang: "
PRICE_PROMPT = "Masukan harga barang: "
INDEX_PROMPT = "Masukan Nomor Barang: "


def _banner(title: str) -> None:
    print("==============")
    print(title)
    print("==============")


def add_items(service: InventoryService, log_path: PathArg = AUDIT_FILE) -> Item:
    """Ask for a new item's details and add it."""
    print()
    print("====================")
    print("== Tambah Barang ==")
    print("====================")
    print()

    name = ask(NAME_PROMPT, parse_name)
    stock = ask(STOCK_PROMPT, parse_stock)
    price = ask(PRICE_PROMPT, parse_price)

    add_log("admin", "Menambahkan barang", log_path)
    item = service.add_item(name, stock, price)
    print("Barang berhasil ditambahkan!")
    return item


def view_items(service: InventoryService) -> None:
    """Print every item, warning about low stock."""
    print("\n== Daftar Barang ==")
    if not service.items:
        print("Tidak ada barang dalam inventori.")
        return
    for item in service.items:
        if item.stock <= LOW_STOCK:
            print(f"[!] Peringatan: Stok '{item.name}' tinggal {item.stock}!")
        print()
        print(
            f"[{item.id}] {item.name} | Stok: {item.stock} | "
            f"Harga: Rp{format_price(item.price):>6}"
        )


def item_name(service: InventoryService, item_id: int) -> Optional[str]:
    """Name of the item with ``item_id``, if there is one."""
    item = service.find(item_id)
    return item.name if item is not None else None


def handle_delete_item(service: InventoryService, log_path: PathArg = AUDIT_FILE) -> None:
    """Ask which item to remove and remove it."""
    _banner("HAPUS BARANG")
    if not service.items:
        print("Tidak ada barang dalam inventori.")
        return
    view_items(service)

    item_id = ask(INDEX_PROMPT, parse_item_index)
    name = item_name(service, item_id) or ""
    service.delete_item(item_id)
    add_log("admin", f"Menghapus barang '{name}'", log_path)


def handle_update_item(service: InventoryService, log_path: PathArg = AUDIT_FILE) -> None:
    """Ask which item to change and its new details."""
    _banner("UPDATE BARANG")
    if not service.items:
        print("Tidak ada barang dalam inventori.")
        return
    view_items(service)

    item_id = ask(INDEX_PROMPT, parse_item_index)
    name = ask(NAME_PROMPT, parse_name)
    stock = ask(STOCK_PROMPT, parse_stock)
    price = ask(PRICE_PROMPT, parse_price)

    service.update_item(item_id, name, stock, price)
    add_log("admin", f"Mengupdate barang '{name}'", log_path)


def handle_update_stock(service: InventoryService, log_path: PathArg = AUDIT_FILE) -> None:
    """Ask which item to restock and its new stock."""
    _banner("UPDATE STOCK")
    if not service.items:
        print("Tidak ada barang dalam inventori.")
        return
    view_items(service)

    item_id = ask(INDEX_PROMPT, parse_item_index)
    stock = ask(STOCK_PROMPT, parse_stock)

    name = item_name(service, item_id) or ""
    service.update_stock(item_id, stock)
    add_log("admin", f"Mengupdate stok '{name}' menjadi {stock}", log_path)


def handle_search_item(service: InventoryService) -> list[Item]:
    """Ask for a name and print the items that match it."""
    print("=============")
    print("Cari Barang")
    print("=============")

    needle = ask(NAME_PROMPT, parse_name)
    found = service.search(needle)

    if not found:
        print("Tidak ada barang ditemukan")
        print(f"Kata kunci: '{needle}'")
    else:
        print("=================")
        print("Hasil Pencarian")
        print("=================")
        for number, item in enumerate(found, start=1):
            print(f"{number}. {item.name} | {item.stock} | Rp{format_price(item.price)}")
    return found