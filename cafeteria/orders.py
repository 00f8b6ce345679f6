"""Order placement: stock validation, totals and the end-of-order save."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable

from loguru import logger

from cafeteria.constant import ORDER_SENTINEL
from cafeteria.models import LineResult, LineStatus, OrderLine, Receipt
from cafeteria.store import RecordStore


class SessionState(Enum):
    COLLECTING = "collecting"
    PERSISTING = "persisting"
    REPORTING = "reporting"
    DONE = "done"


class OrderSession:
    """One order being collected line by line.

    Stock is decremented as soon as a line is accepted, so later lines in
    the same session see what earlier ones left. Nothing is written to disk
    until ``finish`` is called, which saves the menu exactly once.
    """

    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self.receipt = Receipt()
        self.results: list[LineResult] = []
        self.state = SessionState.COLLECTING

    def add_line(self, item_id: int, quantity: int) -> LineResult:
        if self.state is not SessionState.COLLECTING:
            raise RuntimeError(f"order session is {self.state.value}, cannot add lines")

        result = self._resolve(item_id, quantity)
        self.results.append(result)
        return result

    def _resolve(self, item_id: int, quantity: int) -> LineResult:
        item = self.store.find_item(item_id)
        if item is None:
            logger.info("Order line rejected: item {} not found", item_id)
            return LineResult(item_id=item_id, quantity=quantity, status=LineStatus.NOT_FOUND)

        if quantity < 1:
            logger.info("Order line rejected: invalid quantity {} for item {}", quantity, item_id)
            return LineResult(item_id, quantity, LineStatus.INVALID_QUANTITY, item_name=item.name)

        if quantity > item.stock:
            logger.info("Order line rejected: {} x{} requested, {} in stock", item.name, quantity, item.stock)
            return LineResult(item_id, quantity, LineStatus.INSUFFICIENT_STOCK, item_name=item.name)

        self.receipt.add(OrderLine(item_id=item.item_id, name=item.name, price=item.price, quantity=quantity))
        self.store.take_stock(item.item_id, quantity)
        return LineResult(item_id, quantity, LineStatus.FULFILLED, item_name=item.name)

    def finish(self) -> Receipt:
        """Save the menu once and close the session.

        A failed save does not undo accepted lines; it is recorded on the
        receipt as ``save_error``.
        """
        if self.state is not SessionState.COLLECTING:
            raise RuntimeError(f"order session is already {self.state.value}")

        self.state = SessionState.PERSISTING
        try:
            self.store.save_menu()
        except OSError as exc:
            # Accepted lines stay applied in memory.
            logger.exception("Saving menu after order failed")
            self.receipt.save_error = str(exc)
        self.state = SessionState.REPORTING
        logger.info("Order placed: {} line(s), total {}", len(self.receipt.lines), self.receipt.total)
        self.state = SessionState.DONE
        return self.receipt


class OrderEngine:
    """Runs order sessions against a record store."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def start(self) -> OrderSession:
        return OrderSession(self.store)

    def place_order(
        self,
        requests: Iterable[tuple[int, int]],
        on_result: Callable[[LineResult], None] | None = None,
    ) -> Receipt:
        """Process ``(item_id, quantity)`` requests up to the ``-1`` sentinel.

        Requests are consumed lazily, so ``requests`` may be a generator that
        prompts for each line; ``on_result`` is called after every line. An
        exhausted iterable ends the order like the sentinel does.
        """
        session = self.start()
        for item_id, quantity in requests:
            if item_id == ORDER_SENTINEL:
                break
            result = session.add_line(item_id, quantity)
            if on_result is not None:
                on_result(result)
        return session.finish()
