"""Seed menu built from the static rows in constant.py."""

from __future__ import annotations

from cafeteria.constant import SAMPLE_MENU_ROWS
from cafeteria.models import MenuItem


def sample_menu() -> list[MenuItem]:
    """Return fresh copies of the bootstrap menu items."""
    return [
        MenuItem(item_id=item_id, name=name, category=category, price=price, stock=stock)
        for item_id, name, category, price, stock in SAMPLE_MENU_ROWS
    ]
