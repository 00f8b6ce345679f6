"""Rendering helpers for menus, item rows and receipts."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from cafeteria.config import CURRENCY_SYMBOL
from cafeteria.constant import MAIN_MENU_OPTIONS
from cafeteria.models import MenuItem, Receipt

CATEGORY_STYLE = "bold #0b1f0f on #5fbf72"
HEADING_STYLE = "bold"


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def format_main_menu() -> Text:
    text = Text()
    text.append("\n=== Restaurant Management System ===\n", style=HEADING_STYLE)
    # 0 (Exit) is listed last.
    for choice in sorted(MAIN_MENU_OPTIONS, key=lambda c: (c == 0, c)):
        text.append(f"{choice}. {MAIN_MENU_OPTIONS[choice]}\n")
    return text


def format_menu_item(item: MenuItem) -> Text:
    """Render ``ID: 5 | Vegan Buddha Bowl (Vegan) | $10.99 | Available: 15``."""
    text = Text()
    text.append(f"ID: {item.item_id} | ")
    text.append(item.name, style="bold")
    text.append(f" ({item.category}) | {format_money(item.price)} | Available: ")
    text.append(str(item.stock), style="red" if item.stock == 0 else None)
    return text


def format_category_menu(groups: list[tuple[str, list[MenuItem]]]) -> Text:
    text = Text()
    text.append("\n=== CampusBites Cafeteria Menu ===\n", style=HEADING_STYLE)
    for category, items in groups:
        text.append("\nCategory: ")
        text.append(category, style=CATEGORY_STYLE)
        text.append("\n")
        for item in items:
            text.append_text(format_menu_item(item))
            text.append("\n")
    return text


def format_receipt(receipt: Receipt) -> Text:
    text = Text()
    text.append("\n=== Order Summary ===\n", style=HEADING_STYLE)
    for line in receipt.lines:
        text.append(f"- {line.name} x{line.quantity} @ {format_money(line.price)} each\n")
    text.append(f"Total: {format_money(receipt.total)}", style="bold")
    return text
