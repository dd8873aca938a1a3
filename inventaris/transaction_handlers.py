"""Console screens for selling items and reviewing sales."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from .audit import AUDIT_FILE, PathArg, add_log
from .errors import InventoryError, TransactionError, TransactionNotFoundError
from .inputs import ask, parse_date, parse_item_id, parse_quantity
from .inventory import InventoryService, format_price
from .inventory_handlers import view_items
from .models import Transaction
from .storage import save_transactions
from .transactions import TransactionService

MAX_QUANTITY = 10


def _display_timestamp(moment: datetime) -> str:
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    micros = moment.microsecond
    if micros == 0:
        return text
    if micros % 1000 == 0:
        return f"{text}.{micros // 1000:03d}"
    return f"{text}.{micros:06d}"


def make_transaction(
    service: TransactionService,
    inventory: InventoryService,
    username: Optional[str],
    log_path: PathArg = AUDIT_FILE,
) -> Optional[Transaction]:
    """Sell an item chosen at the console; return the sale, or None if it did not go through."""
    if not inventory.items:
        raise TransactionNotFoundError()

    view_items(inventory)
    print()

    item_id = ask("Masukan ID barang: ", parse_item_id)
    quantity = ask("Masukan jumlah barang: ", parse_quantity)

    try:
        inventory.reduce_stock(item_id, quantity)
    except InventoryError as exc:
        print(f"Gagal melakukan transaksi: {exc}")
        return None

    item = inventory.find(item_id)
    if item is None:
        print("Item tidak ditemukan.")
        return None

    total_price = service.calculate_total_price(item.price, quantity)
    total_display = format_price(total_price)

    if quantity > MAX_QUANTITY:
        print("Selamat! Anda mendapatkan diskon 10%")

    transaction = Transaction.create(service.next_id, item_id, item.name, quantity, total_price)

    message = (
        f"Transaksi {item.name} x{quantity} = Rp{total_display} | "
        f"{datetime.now():%Y-%m-%d %H:%M:%S}"
    )
    if username:
        add_log(username, message, log_path)
    else:
        print("Tidak ada user yang login.")

    try:
        save_transactions([transaction], service.path)
    except OSError:
        pass

    service.records.append(transaction)
    service.next_id += 1

    print(f"Transaksi berhasil!! Total: Rp{total_display}")
    return transaction


def view_records(service: TransactionService) -> None:
    """Print the whole sales history."""
    print("\n== Riwayat Transaksi ==")
    if not service.records:
        print("Tidak ada riwayat transaksi.")
        return
    for tx in service.records:
        print(
            f"#{tx.id} | {tx.item_name} x{tx.quantity} = Rp{format_price(tx.total_price)}"
            f" | {_display_timestamp(tx.timestamp)}"
        )


def view_top_selling_item(service: TransactionService) -> None:
    """Print item names by units sold, best sellers first."""
    print("=========================")
    print("\n== Barang Terlaris ==")
    print("=========================")

    ranking = service.top_selling()
    if not ranking:
        print("Tidak ada barang terlaris.")
        return
    for name, count in ranking:
        print(f"{name}: {count} item")


def view_total_transaction(service: TransactionService) -> tuple[float, int]:
    """Print and return today's revenue and number of transactions."""
    today = date.today()
    todays = service.by_date(today)
    total = sum(tx.total_price for tx in todays)
    print(f"Total transaksi hari ini: {format_price(total)}")
    print(f"Total barang terjual: {len(todays)} item")
    return total, len(todays)


def view_transaction_by_date(service: TransactionService) -> list[Transaction]:
    """Ask for a date and print the transactions made on it."""
    try:
        day = ask("Masukan tanggal transaksi (2025-01-01): ", parse_date)
    except TransactionError as exc:
        print(exc)
        return []

    found = service.by_date(day)
    if not found:
        print("Tidak ada transaksi pada tanggal tersebut.")
        return found

    print("\n===============================")
    print(f"Transaksi pada tanggal: {day.isoformat()}")
    print("===============================\n")
    print(f"{'ID':<5} | {'Nama Item':<20} | {'Jumlah':<8} | {'Total Harga':<12} | {'Waktu':<20}")
    print("-" * 75)
    for tx in found:
        price = format_price(tx.total_price)[:2]
        print(
            f"{tx.id:<5} | {tx.item_name:<20} | {tx.quantity:<8} | Rp{price:<11} | "
            f"{_display_timestamp(tx.timestamp)}"
        )
    print(f"\nTotal transaksi: {len(found)}")
    return found