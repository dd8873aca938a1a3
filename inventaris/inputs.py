"""Parsing and prompting for the values typed in at the console."""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, datetime
from typing import Optional, TypeVar

from .errors import InventoryInputError, TransactionInputError, UserInputError
from .models import Role

T = TypeVar("T")

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1
_USIZE_MAX = 2**64 - 1


def _unsigned(text: str, limit: int) -> Optional[int]:
    text = text.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= limit else None


def parse_item_index(text: str) -> int:
    """Item number chosen from the stock list."""
    value = _unsigned(text, _U32_MAX)
    if value is None:
        raise InventoryInputError("Nomor barang tidak valid")
    return value


def parse_name(text: str) -> str:
    """Item name; must not be blank."""
    name = text.strip()
    if not name:
        raise InventoryInputError("Nama tidak boleh kosong")
    return name


def parse_stock(text: str) -> int:
    """Stock count; a whole number above zero."""
    value = _unsigned(text, _U32_MAX)
    if value is None:
        raise InventoryInputError("Stok harus berupa angka")
    if value <= 0:
        raise InventoryInputError("Jumlah harus lebih dari 0")
    return value


def parse_price(text: str) -> float:
    """Price, with commas allowed as thousands separators."""
    cleaned = text.strip().replace(",", "")
    if "_" in cleaned or not cleaned.isascii():
        raise InventoryInputError("Harga harus berupa angka")
    try:
        return float(cleaned)
    except ValueError:
        raise InventoryInputError("Harga harus berupa angka") from None


def parse_item_id(text: str) -> int:
    """Id of the item being sold."""
    value = _unsigned(text, _U32_MAX)
    if value is None:
        raise TransactionInputError("ID barang harus berupa angka")
    return value


def parse_quantity(text: str) -> int:
    """Number of units being sold."""
    value = _unsigned(text, _U32_MAX)
    if value is None:
        raise TransactionInputError("Input jumlah harus berupa angka")
    return value


def parse_date(text: str) -> date:
    """A calendar date written as YYYY-MM-DD."""
    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise TransactionInputError("Input tanggal harus berupa format YYYY-MM-DD") from None


def parse_user_index(text: str) -> int:
    """User number chosen from the user list."""
    value = _unsigned(text, _USIZE_MAX)
    if value is None:
        raise UserInputError("Masukan nomor users yang valid")
    return value


def parse_username(text: str) -> str:
    """Username; must not be blank."""
    username = text.strip()
    if not username:
        raise UserInputError("Username tidak boleh kosong")
    return username


def parse_password(text: str) -> str:
    """Password; must not be blank."""
    secret = text.strip()
    if not secret:
        raise UserInputError("Password tidak boleh kosong")
    return secret


def parse_role(text: str) -> Role:
    """Either ``admin`` or ``kasir``."""
    match text.strip():
        case "admin":
            return Role.ADMIN
        case "kasir":
            return Role.KASIR
        case _:
            raise UserInputError("Role tidak valid")


def ask(prompt: str, parser: Callable[[str], T]) -> T:
    """Show ``prompt``, read one line and hand it to ``parser``."""
    try:
        line = input(prompt)
    except EOFError:
        line = ""
    return parser(line)