"""Parsing of free-form operator input into typed values."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Generic, TypeVar

from cafeteria.constant import MAIN_MENU_OPTIONS
from cafeteria.models import to_price

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed ``value`` or an ``error`` message for the operator."""

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _success(value: T) -> ParseResult[T]:
    return ParseResult(value=value)


def _failure(message: str) -> ParseResult:
    return ParseResult(error=message)


def parse_int(raw: str) -> ParseResult[int]:
    text = raw.strip()
    if not text:
        return _failure("A number is required.")
    try:
        return _success(int(text))
    except ValueError:
        return _failure(f"'{text}' is not a whole number.")


def parse_choice(raw: str) -> ParseResult[int]:
    result = parse_int(raw)
    if not result.ok or result.value not in MAIN_MENU_OPTIONS:
        return _failure("Invalid choice. Try again.")
    return result


def parse_quantity(raw: str) -> ParseResult[int]:
    result = parse_int(raw)
    if result.ok and result.value < 1:
        return _failure("Quantity must be at least 1.")
    return result


def parse_stock(raw: str) -> ParseResult[int]:
    result = parse_int(raw)
    if result.ok and result.value < 0:
        return _failure("Stock must not be negative.")
    return result


def parse_price(raw: str) -> ParseResult[Decimal]:
    text = raw.strip().lstrip("$")
    if not text:
        return _failure("A price is required.")
    try:
        price = Decimal(text)
    except InvalidOperation:
        return _failure(f"'{raw.strip()}' is not a valid price.")
    try:
        return _success(to_price(price))
    except ValueError:
        return _failure("Price must be a non-negative amount.")


def parse_text(raw: str) -> ParseResult[str]:
    text = raw.strip()
    if not text:
        return _failure("This field must not be empty.")
    return _success(text)


def parse_optional_text(raw: str) -> ParseResult[str]:
    return _success(raw.strip())
