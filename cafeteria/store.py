"""In-memory record store backed by the flat-file persistence layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from cafeteria.data import sample_menu
from cafeteria.models import Customer, MenuItem
from cafeteria.persistence import LoadedRecords, TextFileBackend


class RecordNotFoundError(LookupError):
    """No record with the requested identifier exists."""

    def __init__(self, kind: str, record_id: int) -> None:
        super().__init__(f"{kind} with ID {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class DuplicateIdError(ValueError):
    """A record with the same identifier already exists."""

    def __init__(self, kind: str, record_id: int) -> None:
        super().__init__(f"{kind} with ID {record_id} already exists")
        self.kind = kind
        self.record_id = record_id


@dataclass
class LoadReport:
    """What happened while reading the persisted collections."""

    menu_created: bool = False
    customers_missing: bool = False
    skipped_menu_lines: list[int] = field(default_factory=list)
    skipped_customer_lines: list[int] = field(default_factory=list)
    duplicate_menu_ids: list[int] = field(default_factory=list)
    duplicate_customer_ids: list[int] = field(default_factory=list)


def _index(loaded: LoadedRecords, key: str) -> tuple[dict[int, object], list[int]]:
    # First occurrence wins; later duplicates were unreachable by id anyway.
    records: dict[int, object] = {}
    duplicates: list[int] = []
    for record in loaded.records:
        record_id = getattr(record, key)
        if record_id in records:
            duplicates.append(record_id)
            continue
        records[record_id] = record
    return records, duplicates


class RecordStore:
    """Owns the menu and customer collections and persists every change.

    Both collections are dicts keyed by identifier; insertion order is the
    catalog order used for display and for the files on disk. Each collection
    carries a version counter that is bumped on every mutation.
    """

    def __init__(self, backend: TextFileBackend | None = None) -> None:
        self.backend = backend or TextFileBackend()
        self._menu: dict[int, MenuItem] = {}
        self._customers: dict[int, Customer] = {}
        self.menu_version = 0
        self.customers_version = 0

    # -------------------------
    # Load / save
    # -------------------------
    def load(self) -> LoadReport:
        report = LoadReport()

        menu = self.backend.load_menu()
        if menu is None:
            logger.info("Menu file {} not found, bootstrapping sample menu", self.backend.menu_path)
            self._menu = {item.item_id: item for item in sample_menu()}
            self.save_menu()
            report.menu_created = True
        else:
            self._menu, report.duplicate_menu_ids = _index(menu, "item_id")
            report.skipped_menu_lines = menu.skipped_lines
            logger.info("Loaded {} menu items from {}", len(self._menu), self.backend.menu_path)

        customers = self.backend.load_customers()
        if customers is None:
            logger.info("Customer file {} not found, starting empty", self.backend.customers_path)
            self._customers = {}
            report.customers_missing = True
        else:
            self._customers, report.duplicate_customer_ids = _index(customers, "customer_id")
            report.skipped_customer_lines = customers.skipped_lines
            logger.info("Loaded {} customers from {}", len(self._customers), self.backend.customers_path)

        for record_id in report.duplicate_menu_ids:
            logger.warning("Ignoring duplicate menu item id {}", record_id)
        for record_id in report.duplicate_customer_ids:
            logger.warning("Ignoring duplicate customer id {}", record_id)
        return report

    def save_menu(self) -> None:
        self.backend.save_menu(self._menu.values())

    def save_customers(self) -> None:
        self.backend.save_customers(self._customers.values())

    # -------------------------
    # Menu
    # -------------------------
    def menu_items(self) -> list[MenuItem]:
        return list(self._menu.values())

    def find_item(self, item_id: int) -> MenuItem | None:
        return self._menu.get(item_id)

    def get_item(self, item_id: int) -> MenuItem:
        item = self._menu.get(item_id)
        if item is None:
            raise RecordNotFoundError("Menu item", item_id)
        return item

    def add_item(self, item: MenuItem) -> None:
        if item.item_id in self._menu:
            raise DuplicateIdError("Menu item", item.item_id)
        self._menu[item.item_id] = item
        self.menu_version += 1
        self.save_menu()

    def replace_item(self, item: MenuItem) -> None:
        """Overwrite the stored item with the same id, keeping its position."""
        self.get_item(item.item_id)
        self._menu[item.item_id] = item
        self.menu_version += 1
        self.save_menu()

    def remove_item(self, item_id: int) -> MenuItem:
        item = self.get_item(item_id)
        del self._menu[item_id]
        self.menu_version += 1
        self.save_menu()
        return item

    def take_stock(self, item_id: int, quantity: int) -> MenuItem:
        """Decrement stock in memory only; the caller decides when to save."""
        item = self.get_item(item_id)
        if quantity > item.stock:
            raise ValueError(f"cannot take {quantity} of {item.name}, only {item.stock} left")
        item.stock -= quantity
        self.menu_version += 1
        return item

    # -------------------------
    # Customers
    # -------------------------
    def customers(self) -> list[Customer]:
        return list(self._customers.values())

    def get_customer(self, customer_id: int) -> Customer:
        customer = self._customers.get(customer_id)
        if customer is None:
            raise RecordNotFoundError("Customer", customer_id)
        return customer

    def add_customer(self, customer: Customer) -> None:
        if customer.customer_id in self._customers:
            raise DuplicateIdError("Customer", customer.customer_id)
        self._customers[customer.customer_id] = customer
        self.customers_version += 1
        self.save_customers()

    def replace_customer(self, customer: Customer) -> None:
        self.get_customer(customer.customer_id)
        self._customers[customer.customer_id] = customer
        self.customers_version += 1
        self.save_customers()

    def remove_customer(self, customer_id: int) -> Customer:
        customer = self.get_customer(customer_id)
        del self._customers[customer_id]
        self.customers_version += 1
        self.save_customers()
        return customer
