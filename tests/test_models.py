from datetime import datetime

import pytest

from inventaris.models import Item, Role, Transaction, User


def test_item_round_trip():
    item = Item(id=3, name="Pensil", stock=12, price=2500.0)
    assert Item.from_dict(item.to_dict()) == item


def test_item_dict_keys():
    item = Item(id=1, name="Buku", stock=4, price=1.5)
    assert item.to_dict() == {"id": 1, "name": "Buku", "stock": 4, "price": 1.5}


def test_item_from_dict_missing_key():
    with pytest.raises(KeyError):
        Item.from_dict({"id": 1, "name": "Buku", "stock": 4})


def test_transaction_create_uses_current_time():
    before = datetime.now()
    tx = Transaction.create(1, 2, "Buku", 3, 4500.0)
    after = datetime.now()
    assert before <= tx.timestamp <= after
    assert (tx.id, tx.item_id, tx.item_name, tx.quantity, tx.total_price) == (
        1,
        2,
        "Buku",
        3,
        4500.0,
    )


def test_transaction_round_trip():
    tx = Transaction(5, 1, "Pena", 2, 3000.0, datetime(2025, 1, 1, 10, 30, 15, 250000))
    assert Transaction.from_dict(tx.to_dict()) == tx


def test_transaction_timestamp_without_fraction():
    data = {
        "id": 1,
        "item_id": 1,
        "item_name": "Pena",
        "quantity": 1,
        "total_price": 10.0,
        "timestamp": "2025-01-01T10:00:00",
    }
    assert Transaction.from_dict(data).timestamp == datetime(2025, 1, 1, 10, 0, 0)


def test_transaction_timestamp_with_nanoseconds():
    data = {
        "id": 1,
        "item_id": 1,
        "item_name": "Pena",
        "quantity": 1,
        "total_price": 10.0,
        "timestamp": "2025-01-01T10:00:00.123456789",
    }
    assert Transaction.from_dict(data).timestamp.microsecond == 123456


def test_transaction_bad_timestamp():
    data = {
        "id": 1,
        "item_id": 1,
        "item_name": "Pena",
        "quantity": 1,
        "total_price": 10.0,
        "timestamp": "kemarin",
    }
    with pytest.raises(ValueError):
        Transaction.from_dict(data)


def test_role_display():
    password = "password"
    admin = User(1, "admin", password, Role.ADMIN)
    kasir = User(2, "kasir", password, Role.KASIR)
    assert str(admin.role) == "Admin"
    assert str(kasir.role) == "Kasir"


def test_user_equality():
    password = "password"
    first = User(1, "admin", password, Role.ADMIN)
    assert first == User(1, "admin", password, Role.ADMIN)
    assert first != User(1, "admin", password, Role.KASIR)