"""Domain models for the cafeteria console."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

CENT = Decimal("0.01")


def to_price(value: Decimal | str | int | float) -> Decimal:
    """Coerce a price to a non-negative Decimal rounded to cents."""
    try:
        price = Decimal(str(value))
        if not price.is_finite():
            raise ValueError(f"price must be a finite amount, got {value}")
        # Raises InvalidOperation when the amount needs more digits than the context allows.
        price = price.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"price is not a usable amount: {value}") from None
    if price < 0:
        raise ValueError("price must not be negative")
    return price


@dataclass
class MenuItem:
    """A dish on the cafeteria menu."""

    item_id: int
    name: str
    category: str
    price: Decimal
    stock: int

    def __post_init__(self) -> None:
        self.price = to_price(self.price)
        if self.stock < 0:
            raise ValueError("stock must not be negative")


@dataclass
class Customer:
    """A registered cafeteria customer."""

    customer_id: int
    name: str
    contact: str


@dataclass(frozen=True)
class OrderLine:
    """A fulfilled order row, snapshotted at ordering time."""

    item_id: int
    name: str
    price: Decimal
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


class LineStatus(Enum):
    FULFILLED = "fulfilled"
    NOT_FOUND = "not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INVALID_QUANTITY = "invalid_quantity"


@dataclass(frozen=True)
class LineResult:
    """Outcome of a single requested order line."""

    item_id: int
    quantity: int
    status: LineStatus
    item_name: str | None = None

    @property
    def fulfilled(self) -> bool:
        return self.status is LineStatus.FULFILLED


@dataclass
class Receipt:
    """Fulfilled lines and running total for one order session."""

    lines: list[OrderLine] = field(default_factory=list)
    total: Decimal = Decimal("0.00")
    save_error: str | None = None

    def add(self, line: OrderLine) -> None:
        self.lines.append(line)
        self.total += line.subtotal
