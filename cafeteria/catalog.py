"""Menu and customer maintenance on top of the record store."""

from __future__ import annotations

from decimal import Decimal

from loguru import logger

from cafeteria.constant import ORDER_SENTINEL
from cafeteria.models import Customer, MenuItem
from cafeteria.store import RecordStore


def _required(value: str, label: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{label} must not be empty")
    return value


def group_by_category(items: list[MenuItem]) -> list[tuple[str, list[MenuItem]]]:
    """Group items under their sorted category labels, keeping catalog order inside each group."""
    categories = sorted({item.category for item in items})
    return [(category, [item for item in items if item.category == category]) for category in categories]


class CatalogManager:
    """Add, update and remove menu items and customers.

    Every successful mutation is persisted by the store right away. Lookups
    that miss raise ``RecordNotFoundError`` before anything is touched.
    """

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    # -------------------------
    # Menu items
    # -------------------------
    def menu_by_category(self) -> list[tuple[str, list[MenuItem]]]:
        return group_by_category(self.store.menu_items())

    def has_menu_item(self, item_id: int) -> bool:
        return self.store.find_item(item_id) is not None

    def _build_item(self, item_id: int, name: str, category: str, price: Decimal, stock: int) -> MenuItem:
        return MenuItem(
            item_id=item_id,
            name=_required(name, "name"),
            category=_required(category, "category"),
            price=price,
            stock=stock,
        )

    def add_menu_item(self, item_id: int, name: str, category: str, price: Decimal, stock: int) -> MenuItem:
        if item_id == ORDER_SENTINEL:
            raise ValueError(f"ID {ORDER_SENTINEL} is reserved")
        item = self._build_item(item_id, name, category, price, stock)
        self.store.add_item(item)
        logger.info("Added menu item {} ({})", item.item_id, item.name)
        return item

    def update_menu_item(self, item_id: int, name: str, category: str, price: Decimal, stock: int) -> MenuItem:
        self.store.get_item(item_id)
        item = self._build_item(item_id, name, category, price, stock)
        self.store.replace_item(item)
        logger.info("Updated menu item {} ({})", item.item_id, item.name)
        return item

    def remove_menu_item(self, item_id: int) -> MenuItem:
        item = self.store.remove_item(item_id)
        logger.info("Removed menu item {} ({})", item.item_id, item.name)
        return item

    # -------------------------
    # Customers
    # -------------------------
    def add_customer(self, customer_id: int, name: str, contact: str) -> Customer:
        customer = Customer(customer_id=customer_id, name=_required(name, "name"), contact=contact.strip())
        self.store.add_customer(customer)
        logger.info("Added customer {}", customer.customer_id)
        return customer

    def update_customer(self, customer_id: int, name: str, contact: str) -> Customer:
        self.store.get_customer(customer_id)
        customer = Customer(customer_id=customer_id, name=_required(name, "name"), contact=contact.strip())
        self.store.replace_customer(customer)
        logger.info("Updated customer {}", customer.customer_id)
        return customer

    def remove_customer(self, customer_id: int) -> Customer:
        customer = self.store.remove_customer(customer_id)
        logger.info("Removed customer {}", customer.customer_id)
        return customer
