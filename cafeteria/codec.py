"""Delimited-record codec for the menu and customer files."""

from __future__ import annotations

import csv
from decimal import Decimal, InvalidOperation
from typing import Iterable, Iterator, TextIO

from cafeteria.models import Customer, MenuItem

MENU_FIELDS = ("id", "name", "category", "price", "stock")
CUSTOMER_FIELDS = ("id", "name", "contact")


class RecordFormatError(ValueError):
    """A persisted line could not be decoded into a record."""


def _writer(out: TextIO):
    return csv.writer(out, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)


def encode_menu_item(item: MenuItem) -> list[str]:
    return [str(item.item_id), item.name, item.category, f"{item.price:.2f}", str(item.stock)]


def encode_customer(customer: Customer) -> list[str]:
    return [str(customer.customer_id), customer.name, customer.contact]


def _expect_fields(row: list[str], fields: tuple[str, ...]) -> None:
    if len(row) != len(fields):
        raise RecordFormatError(f"expected {len(fields)} fields ({','.join(fields)}), got {len(row)}")


def _parse_int(raw: str, field_name: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise RecordFormatError(f"{field_name} is not an integer: {raw!r}") from None


def decode_menu_item(row: list[str]) -> MenuItem:
    _expect_fields(row, MENU_FIELDS)
    item_id = _parse_int(row[0], "id")
    stock = _parse_int(row[4], "stock")
    try:
        price = Decimal(row[3].strip())
    except InvalidOperation:
        raise RecordFormatError(f"price is not a number: {row[3]!r}") from None
    try:
        return MenuItem(item_id=item_id, name=row[1], category=row[2], price=price, stock=stock)
    except ValueError as exc:
        raise RecordFormatError(str(exc)) from exc


def decode_customer(row: list[str]) -> Customer:
    # Legacy files wrote contacts unquoted, so extra fields belong to the contact.
    if len(row) > len(CUSTOMER_FIELDS):
        row = row[:2] + [",".join(row[2:])]
    _expect_fields(row, CUSTOMER_FIELDS)
    return Customer(customer_id=_parse_int(row[0], "id"), name=row[1], contact=row[2])


def write_rows(out: TextIO, rows: Iterable[list[str]]) -> None:
    _writer(out).writerows(rows)


def split_record(line: str) -> list[str]:
    """Split one physical line into fields.

    Lines are read with ``surrogateescape``, so bytes that were not valid
    UTF-8 show up as lone surrogates and are rejected here.
    """
    try:
        line.encode("utf-8")
    except UnicodeEncodeError:
        raise RecordFormatError("line is not valid UTF-8") from None
    try:
        return next(csv.reader([line.rstrip("\r\n")], strict=True))
    except csv.Error as exc:
        raise RecordFormatError(f"bad quoting: {exc}") from None


def read_lines(src: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every non-blank physical line."""
    for line_no, line in enumerate(src, start=1):
        if line.strip():
            yield line_no, line
