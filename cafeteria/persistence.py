"""Flat-file persistence for the menu and customer collections."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, TypeVar

from loguru import logger

from cafeteria.codec import (
    RecordFormatError,
    decode_customer,
    decode_menu_item,
    encode_customer,
    encode_menu_item,
    read_lines,
    split_record,
    write_rows,
)
from cafeteria.config import CUSTOMERS_PATH, MENU_PATH
from cafeteria.models import Customer, MenuItem

T = TypeVar("T")


@dataclass
class LoadedRecords:
    """Records read from one file plus the lines that had to be skipped."""

    records: list = field(default_factory=list)
    skipped_lines: list[int] = field(default_factory=list)


def atomic_write_rows(path: Path, rows: Iterable[list[str]]) -> None:
    """Write all rows to a temp file next to ``path`` and swap it in."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    with tmp.open("w", encoding="utf-8", newline="") as fh:
        write_rows(fh, rows)
    os.replace(tmp, path)


def _load(path: Path, decode: Callable[[list[str]], T]) -> LoadedRecords | None:
    if not path.exists():
        return None

    loaded = LoadedRecords()
    with path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        for line_no, line in read_lines(fh):
            try:
                loaded.records.append(decode(split_record(line)))
            except RecordFormatError as exc:
                logger.warning("Skipping malformed record {}:{}: {}", path, line_no, exc)
                loaded.skipped_lines.append(line_no)
    return loaded


class TextFileBackend:
    """Reads and rewrites the menu and customer text files."""

    def __init__(self, menu_path: str | Path = MENU_PATH, customers_path: str | Path = CUSTOMERS_PATH) -> None:
        self.menu_path = Path(menu_path)
        self.customers_path = Path(customers_path)

    def load_menu(self) -> LoadedRecords | None:
        """Return the stored menu, or ``None`` when the file does not exist."""
        return _load(self.menu_path, decode_menu_item)

    def load_customers(self) -> LoadedRecords | None:
        """Return the stored customers, or ``None`` when the file does not exist."""
        return _load(self.customers_path, decode_customer)

    def save_menu(self, items: Iterable[MenuItem]) -> None:
        atomic_write_rows(self.menu_path, (encode_menu_item(item) for item in items))
        logger.debug("Saved menu to {}", self.menu_path)

    def save_customers(self, customers: Iterable[Customer]) -> None:
        atomic_write_rows(self.customers_path, (encode_customer(c) for c in customers))
        logger.debug("Saved customers to {}", self.customers_path)
