"""Test fixtures for the cafeteria console tests."""

import io
from decimal import Decimal

import pytest
from rich.console import Console

from cafeteria.models import MenuItem
from cafeteria.persistence import TextFileBackend
from cafeteria.store import RecordStore


@pytest.fixture
def backend(tmp_path):
    """Create a file backend rooted in a temporary directory.

    Returns:
        TextFileBackend: Backend writing menu.txt and customers.txt under tmp_path.
    """
    return TextFileBackend(tmp_path / "menu.txt", tmp_path / "customers.txt")


@pytest.fixture
def store(backend):
    """Create a store loaded with the bootstrap sample menu.

    Returns:
        RecordStore: Store whose menu file has just been created from sample data.
    """
    record_store = RecordStore(backend)
    record_store.load()
    return record_store


@pytest.fixture
def buddha_bowl():
    """The sample item used in most order scenarios."""
    return MenuItem(item_id=5, name="Vegan Buddha Bowl", category="Vegan", price=Decimal("10.99"), stock=15)


@pytest.fixture
def output():
    """Rich console writing plain text into a buffer.

    Returns:
        tuple[Console, io.StringIO]: The console and the buffer it writes to.
    """
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None, highlight=False), buffer
