"""Tests for console rendering helpers."""

from decimal import Decimal

from cafeteria.catalog import group_by_category
from cafeteria.models import MenuItem, OrderLine, Receipt
from cafeteria.rendering import (
    format_category_menu,
    format_main_menu,
    format_menu_item,
    format_money,
    format_receipt,
)


def test_format_money():
    assert format_money(Decimal("0")) == "$0.00"
    assert format_money(Decimal("10.5")) == "$10.50"
    assert format_money(Decimal("32.97")) == "$32.97"


def test_format_menu_item(buddha_bowl):
    assert format_menu_item(buddha_bowl).plain == "ID: 5 | Vegan Buddha Bowl (Vegan) | $10.99 | Available: 15"


def test_markup_in_names_is_kept_literally():
    item = MenuItem(1, "[bold]Soup[/bold]", "Soups", Decimal("2.00"), 1)
    assert "[bold]Soup[/bold]" in format_menu_item(item).plain


def test_format_main_menu_lists_exit_last():
    lines = format_main_menu().plain.strip().splitlines()
    assert lines[0] == "=== Restaurant Management System ==="
    assert lines[1] == "1. Display Menu"
    assert lines[-1] == "0. Exit"
    assert len(lines) == 9


def test_format_category_menu(buddha_bowl):
    tacos = MenuItem(6, "Vegan Tacos", "Vegan", Decimal("8.49"), 0)
    burger = MenuItem(1, "Veggie Burger", "Vegetarian", Decimal("8.99"), 25)
    text = format_category_menu(group_by_category([burger, buddha_bowl, tacos])).plain

    assert text.splitlines() == [
        "",
        "=== CampusBites Cafeteria Menu ===",
        "",
        "Category: Vegan",
        "ID: 5 | Vegan Buddha Bowl (Vegan) | $10.99 | Available: 15",
        "ID: 6 | Vegan Tacos (Vegan) | $8.49 | Available: 0",
        "",
        "Category: Vegetarian",
        "ID: 1 | Veggie Burger (Vegetarian) | $8.99 | Available: 25",
    ]


def test_empty_receipt():
    assert format_receipt(Receipt()).plain.splitlines() == ["", "=== Order Summary ===", "Total: $0.00"]


def test_receipt_lines():
    receipt = Receipt()
    receipt.add(OrderLine(item_id=8, name="Vegan Chili", price=Decimal("7.99"), quantity=2))
    receipt.add(OrderLine(item_id=2, name="Veggie Wrap", price=Decimal("7.49"), quantity=1))

    assert format_receipt(receipt).plain.splitlines()[2:] == [
        "- Vegan Chili x2 @ $7.99 each",
        "- Veggie Wrap x1 @ $7.49 each",
        "Total: $23.47",
    ]
