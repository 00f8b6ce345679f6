"""Tests for the record store and its file backend."""

from decimal import Decimal

import pytest

from cafeteria.models import Customer, MenuItem
from cafeteria.store import DuplicateIdError, RecordNotFoundError, RecordStore


def test_missing_menu_bootstraps_sample_data(backend):
    store = RecordStore(backend)
    report = store.load()

    assert report.menu_created is True
    assert report.customers_missing is True
    items = store.menu_items()
    assert [item.item_id for item in items] == list(range(1, 11))
    assert {item.category for item in items} == {"Vegetarian", "Vegan", "Gluten-Free"}
    assert backend.menu_path.read_text(encoding="utf-8").splitlines()[0] == "1,Veggie Burger,Vegetarian,8.99,25"
    # The customer file is only written on the first customer change.
    assert not backend.customers_path.exists()


def test_existing_menu_is_loaded_not_replaced(backend):
    backend.menu_path.write_text("5,Vegan Buddha Bowl,Vegan,10.99,15\n", encoding="utf-8")
    store = RecordStore(backend)
    report = store.load()

    assert report.menu_created is False
    assert store.menu_items() == [
        MenuItem(item_id=5, name="Vegan Buddha Bowl", category="Vegan", price=Decimal("10.99"), stock=15)
    ]


def test_empty_menu_file_is_not_bootstrapped(backend):
    backend.menu_path.write_text("", encoding="utf-8")
    store = RecordStore(backend)
    store.load()
    assert store.menu_items() == []


def test_save_then_reload_round_trip(store, backend):
    store.add_item(MenuItem(item_id=11, name="Soup, Tomato", category="Vegan", price=Decimal("3.5"), stock=4))
    store.add_customer(Customer(customer_id=1, name="Ana", contact="ana@example.com"))

    reloaded = RecordStore(backend)
    reloaded.load()

    assert reloaded.menu_items() == store.menu_items()
    assert reloaded.customers() == store.customers()


def test_malformed_and_duplicate_lines_are_skipped(backend):
    backend.menu_path.write_text(
        "1,Tea,Drinks,2.00,3\nbroken line\n1,Coffee,Drinks,3.00,4\n2,Cake,Dessert,4.00,x\n",
        encoding="utf-8",
    )
    store = RecordStore(backend)
    report = store.load()

    assert [item.name for item in store.menu_items()] == ["Tea"]
    assert report.skipped_menu_lines == [2, 4]
    assert report.duplicate_menu_ids == [1]


def test_add_duplicate_id_is_rejected_without_saving(store, backend):
    before = backend.menu_path.read_bytes()
    with pytest.raises(DuplicateIdError):
        store.add_item(MenuItem(item_id=5, name="Other", category="Vegan", price=Decimal("1.00"), stock=1))
    assert backend.menu_path.read_bytes() == before


def test_replace_keeps_catalog_position(store):
    store.replace_item(MenuItem(item_id=2, name="Big Wrap", category="Vegetarian", price=Decimal("9.00"), stock=2))
    assert [item.item_id for item in store.menu_items()][:3] == [1, 2, 3]
    assert store.get_item(2).name == "Big Wrap"


def test_mutations_bump_versions(store):
    menu_version = store.menu_version
    store.take_stock(5, 1)
    store.remove_item(1)
    assert store.menu_version == menu_version + 2

    store.add_customer(Customer(customer_id=3, name="Bo", contact=""))
    store.remove_customer(3)
    assert store.customers_version == 2


def test_take_stock_does_not_save(store, backend):
    before = backend.menu_path.read_bytes()
    store.take_stock(5, 3)
    assert store.get_item(5).stock == 12
    assert backend.menu_path.read_bytes() == before


def test_take_stock_never_goes_negative(store):
    with pytest.raises(ValueError):
        store.take_stock(9, 11)
    assert store.get_item(9).stock == 10


def test_missing_ids_raise_not_found(store):
    with pytest.raises(RecordNotFoundError):
        store.remove_item(99)
    with pytest.raises(RecordNotFoundError):
        store.get_customer(1)


def test_atomic_save_leaves_no_temp_file(store, backend):
    store.save_menu()
    assert not backend.menu_path.with_name("menu.txt.tmp").exists()


def test_oversized_price_line_is_skipped(backend):
    backend.menu_path.write_text("1,Tea,Drinks,1e30,3\n2,Cake,Dessert,4.00,1\n", encoding="utf-8")
    store = RecordStore(backend)
    report = store.load()

    assert [item.item_id for item in store.menu_items()] == [2]
    assert report.skipped_menu_lines == [1]


def test_non_utf8_line_is_skipped_not_fatal(backend):
    backend.menu_path.write_bytes(b"1,Caf\xe9 Latte,Drinks,2.00,3\n2,Tea,Drinks,1.50,4\n")
    store = RecordStore(backend)
    report = store.load()

    assert [item.name for item in store.menu_items()] == ["Tea"]
    assert report.skipped_menu_lines == [1]


def test_stray_quote_costs_only_its_own_line(backend):
    backend.menu_path.write_text(
        '1,"Big Burger,Mains,5.00,2\n2,Fries,Sides,2.50,10\n3,Shake,Drinks,3.00,6\n',
        encoding="utf-8",
    )
    store = RecordStore(backend)
    report = store.load()

    assert [item.item_id for item in store.menu_items()] == [2, 3]
    assert report.skipped_menu_lines == [1]


def test_legacy_customer_with_comma_in_contact_survives_save(backend):
    backend.menu_path.write_text("", encoding="utf-8")
    backend.customers_path.write_text("1,Ana,12 Main St, Springfield\n", encoding="utf-8")
    store = RecordStore(backend)
    store.load()

    store.add_customer(Customer(customer_id=2, name="Bo", contact=""))

    assert backend.customers_path.read_text(encoding="utf-8") == '1,Ana,"12 Main St, Springfield"\n2,Bo,\n'
