import pytest

from inventaris.errors import InsufficientStockError, ItemNotFoundError, SaveError
from inventaris.inventory import InventoryService, format_price
from inventaris.models import Item
from inventaris.storage import load_items, save_items


@pytest.fixture
def service(tmp_path):
    return InventoryService.load(tmp_path / "items.json")


def test_load_missing_file_is_empty(service):
    assert service.items == []
    assert service.next_id == 1


def test_load_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "items.json"
    path.write_text("garbage", encoding="utf-8")
    loaded = InventoryService.load(path)
    assert loaded.items == []
    assert loaded.next_id == 1


def test_load_continues_ids_after_last(tmp_path):
    path = tmp_path / "items.json"
    save_items([Item(4, "Buku", 1, 10.0), Item(9, "Pena", 2, 20.0)], path)
    loaded = InventoryService.load(path)
    assert loaded.next_id == 10
    assert [item.name for item in loaded.items] == ["Buku", "Pena"]


def test_add_item_assigns_ids_and_saves(service):
    first = service.add_item("Buku", 10, 5000.0)
    second = service.add_item("Pena", 5, 2500.0)
    assert (first.id, second.id) == (1, 2)
    assert service.next_id == 3
    assert load_items(service.path) == service.items


def test_add_item_save_failure(tmp_path):
    broken = InventoryService(path=tmp_path)
    with pytest.raises(SaveError):
        broken.add_item("Buku", 1, 1.0)


def test_reduce_stock(service):
    item = service.add_item("Buku", 10, 5000.0)
    service.reduce_stock(item.id, 4)
    assert service.find(item.id).stock == 6
    assert load_items(service.path)[0].stock == 6


def test_reduce_stock_to_zero(service):
    item = service.add_item("Buku", 3, 5000.0)
    service.reduce_stock(item.id, 3)
    assert service.find(item.id).stock == 0


def test_reduce_stock_insufficient(service):
    item = service.add_item("Buku", 2, 5000.0)
    with pytest.raises(InsufficientStockError):
        service.reduce_stock(item.id, 3)
    assert service.find(item.id).stock == 2


def test_reduce_stock_unknown_item(service):
    with pytest.raises(ItemNotFoundError):
        service.reduce_stock(42, 1)


def test_delete_item(service):
    service.add_item("Buku", 1, 1.0)
    keep = service.add_item("Pena", 1, 1.0)
    assert service.delete_item(1) is True
    assert service.items == [keep]
    assert load_items(service.path) == [keep]


def test_delete_unknown_item(service, capsys):
    service.add_item("Buku", 1, 1.0)
    assert service.delete_item(7) is False
    assert len(service.items) == 1
    assert "Nomor barang tidak valid!" in capsys.readouterr().out


def test_update_item(service):
    item = service.add_item("Buku", 1, 1.0)
    assert service.update_item(item.id, "Buku Tulis", 8, 7000.0) is True
    assert service.find(item.id) == Item(item.id, "Buku Tulis", 8, 7000.0)
    assert load_items(service.path) == service.items


def test_update_unknown_item(service):
    assert service.update_item(3, "X", 1, 1.0) is False


def test_update_stock(service):
    item = service.add_item("Buku", 1, 1.0)
    assert service.update_stock(item.id, 25) is True
    assert load_items(service.path)[0].stock == 25


def test_update_stock_unknown(service):
    assert service.update_stock(5, 1) is False


def test_search_ignores_case(service):
    service.add_item("Buku Tulis", 1, 1.0)
    service.add_item("Pena", 1, 1.0)
    service.add_item("buku gambar", 1, 1.0)
    assert [item.name for item in service.search("BUKU")] == ["Buku Tulis", "buku gambar"]
    assert service.search("penggaris") == []


def test_search_returns_copies(service):
    service.add_item("Buku", 1, 1.0)
    found = service.search("buku")
    found[0].stock = 99
    assert service.find(1).stock == 1


def test_find_missing(service):
    assert service.find(1) is None


def test_format_price_groups_thousands():
    assert format_price(1000.0) == "1.000"
    assert format_price(1000000.0) == "1.000.000"


@pytest.mark.parametrize("value", [0, 7, 999, 1000, 12345, 987654321, 10**21])
def test_format_price_keeps_digits(value):
    text = format_price(float(value))
    assert text.replace(".", "") == str(value)
    assert all(len(group) == 3 for group in text.split(".")[1:])