"""Numbered-menu console driver."""

from __future__ import annotations

from typing import Callable, Iterator, TextIO, TypeVar

from loguru import logger
from rich.console import Console

from cafeteria.catalog import CatalogManager
from cafeteria.constant import ORDER_SENTINEL
from cafeteria.inputs import (
    ParseResult,
    parse_choice,
    parse_int,
    parse_optional_text,
    parse_price,
    parse_quantity,
    parse_stock,
    parse_text,
)
from cafeteria.models import LineResult, LineStatus
from cafeteria.orders import OrderEngine
from cafeteria.rendering import format_category_menu, format_main_menu, format_receipt
from cafeteria.store import DuplicateIdError, LoadReport, RecordNotFoundError, RecordStore

T = TypeVar("T")

ERROR_STYLE = "#ffb3b3"
OK_STYLE = "#5fbf72"


class CafeteriaConsole:
    """Blocking read-eval loop over the catalog and order engine.

    ``stream`` replaces the terminal as the input source when given; an
    empty read from it is treated as end of input.
    """

    def __init__(self, store: RecordStore, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.store = store
        self.catalog = CatalogManager(store)
        self.orders = OrderEngine(store)
        self.console = console or Console(highlight=False)
        self.stream = stream
        self._input_closed = False
        self._actions: dict[int, Callable[[], None]] = {
            1: self.display_menu,
            2: self.add_menu_item,
            3: self.update_menu_item,
            4: self.remove_menu_item,
            5: self.add_customer,
            6: self.remove_customer,
            7: self.place_order,
        }

    # -------------------------
    # I/O helpers
    # -------------------------
    def _say(self, message: str, style: str | None = None) -> None:
        self.console.print(message, style=style, markup=False, emoji=False, highlight=False)

    def _read(self, label: str) -> str:
        raw = self.console.input(label, markup=False, emoji=False, stream=self.stream)
        if self.stream is not None and raw == "":
            raise EOFError
        return raw

    def ask(self, label: str, parser: Callable[[str], ParseResult[T]]) -> T:
        """Prompt until ``parser`` accepts the input."""
        while True:
            result = parser(self._read(label))
            if result.ok:
                return result.value
            self._say(result.error, style=ERROR_STYLE)

    # -------------------------
    # Main loop
    # -------------------------
    def report_load(self, report: LoadReport) -> None:
        if report.menu_created:
            self._say("Menu file not found. Creating a new one...")
            self._say("Sample menu created and saved to file.")
        if report.customers_missing:
            self._say("Customer file not found. Creating a new one...")
        skipped = len(report.skipped_menu_lines) + len(report.skipped_customer_lines)
        if skipped:
            self._say(f"Skipped {skipped} unreadable record(s); see the log for details.", style=ERROR_STYLE)
        duplicates = len(report.duplicate_menu_ids) + len(report.duplicate_customer_ids)
        if duplicates:
            self._say(f"Ignored {duplicates} record(s) with a duplicate ID.", style=ERROR_STYLE)

    def run(self) -> None:
        try:
            while True:
                self.console.print(format_main_menu(), end="")
                choice = parse_choice(self._read("Enter your choice: "))
                if not choice.ok:
                    self._say(choice.error, style=ERROR_STYLE)
                    continue
                if choice.value == 0:
                    break
                self.dispatch(choice.value)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving main loop")
            self.console.print()
        self._say("Exiting system...")

    def dispatch(self, choice: int) -> None:
        try:
            self._actions[choice]()
        except OSError as exc:
            logger.exception("Saving failed")
            self._say(f"Could not save changes: {exc}", style=ERROR_STYLE)

    # -------------------------
    # Menu items
    # -------------------------
    def display_menu(self) -> None:
        self.console.print(format_category_menu(self.catalog.menu_by_category()))

    def add_menu_item(self) -> None:
        item_id = self.ask("Enter Menu Item ID: ", parse_int)
        if self.catalog.has_menu_item(item_id):
            self._say(f"Menu item with ID {item_id} already exists.", style=ERROR_STYLE)
            return
        name = self.ask("Enter Menu Item Name: ", parse_text)
        category = self.ask("Enter Menu Item Category: ", parse_text)
        price = self.ask("Enter Menu Item Price: ", parse_price)
        stock = self.ask("Enter Menu Item Stock: ", parse_stock)
        try:
            self.catalog.add_menu_item(item_id, name, category, price, stock)
        except DuplicateIdError:
            self._say(f"Menu item with ID {item_id} already exists.", style=ERROR_STYLE)
            return
        except ValueError as exc:
            self._say(f"Menu item not added: {exc}.", style=ERROR_STYLE)
            return
        self._say("Menu item added successfully and saved to file!", style=OK_STYLE)

    def update_menu_item(self) -> None:
        item_id = self.ask("Enter the ID of the Menu Item to Update: ", parse_int)
        if not self.catalog.has_menu_item(item_id):
            self._say(f"Menu item with ID {item_id} not found.", style=ERROR_STYLE)
            return
        name = self.ask("Enter New Name: ", parse_text)
        category = self.ask("Enter New Category: ", parse_text)
        price = self.ask("Enter New Price: ", parse_price)
        stock = self.ask("Enter New Stock: ", parse_stock)
        try:
            self.catalog.update_menu_item(item_id, name, category, price, stock)
        except RecordNotFoundError:
            self._say(f"Menu item with ID {item_id} not found.", style=ERROR_STYLE)
            return
        self._say("Menu item updated successfully and saved to file!", style=OK_STYLE)

    def remove_menu_item(self) -> None:
        item_id = self.ask("Enter the ID of the Menu Item to Remove: ", parse_int)
        try:
            self.catalog.remove_menu_item(item_id)
        except RecordNotFoundError:
            self._say(f"Menu item with ID {item_id} not found.", style=ERROR_STYLE)
            return
        self._say("Menu item removed successfully and saved to file!", style=OK_STYLE)

    # -------------------------
    # Customers
    # -------------------------
    def add_customer(self) -> None:
        customer_id = self.ask("Enter Customer ID: ", parse_int)
        name = self.ask("Enter Customer Name: ", parse_text)
        contact = self.ask("Enter Customer Contact: ", parse_optional_text)
        try:
            self.catalog.add_customer(customer_id, name, contact)
        except DuplicateIdError:
            self._say(f"Customer with ID {customer_id} already exists.", style=ERROR_STYLE)
            return
        self._say("Customer added successfully and saved to file!", style=OK_STYLE)

    def remove_customer(self) -> None:
        customer_id = self.ask("Enter the ID of the Customer to Remove: ", parse_int)
        try:
            self.catalog.remove_customer(customer_id)
        except RecordNotFoundError:
            self._say(f"Customer with ID {customer_id} not found.", style=ERROR_STYLE)
            return
        self._say("Customer removed successfully and saved to file!", style=OK_STYLE)

    # -------------------------
    # Orders
    # -------------------------
    def _order_requests(self) -> Iterator[tuple[int, int]]:
        while True:
            try:
                item_id = self.ask("Item ID: ", parse_int)
                if item_id == ORDER_SENTINEL:
                    return
                quantity = self.ask("Quantity: ", parse_quantity)
            except (EOFError, KeyboardInterrupt):
                # Close the order with what was accepted so far.
                self._input_closed = True
                return
            yield item_id, quantity

    def _report_line(self, result: LineResult) -> None:
        if result.status is LineStatus.NOT_FOUND:
            self._say(f"Item with ID {result.item_id} not found.", style=ERROR_STYLE)
        elif result.status is LineStatus.INSUFFICIENT_STOCK:
            self._say(f"Insufficient stock for {result.item_name}.", style=ERROR_STYLE)
        elif result.status is LineStatus.INVALID_QUANTITY:
            self._say(f"Invalid quantity for {result.item_name}.", style=ERROR_STYLE)

    def place_order(self) -> None:
        self._say(f"\nEnter your order (Item ID and Quantity, {ORDER_SENTINEL} to stop):")
        self._input_closed = False
        receipt = self.orders.place_order(self._order_requests(), on_result=self._report_line)
        self.console.print(format_receipt(receipt))
        if receipt.save_error is not None:
            self._say(f"Could not save changes: {receipt.save_error}", style=ERROR_STYLE)
        if self._input_closed:
            raise EOFError
