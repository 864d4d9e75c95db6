# ABOUTME: Shared pytest fixtures for BookBank tests.
# ABOUTME: Provides a temporary inventory database and an inventory wrapper around it.

import sqlite3
from collections.abc import Iterator
from pathlib import Path

import pytest

from bookbank.db.connection import open_inventory
from bookbank.db.inventory import LibraryInventory


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a throwaway inventory database."""
    return tmp_path / "inventory.db"


@pytest.fixture
def inventory_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    """An open, schema-initialized inventory connection."""
    conn = open_inventory(db_path)
    yield conn
    conn.close()


@pytest.fixture
def inventory(inventory_conn: sqlite3.Connection) -> LibraryInventory:
    """A LibraryInventory over an empty temporary database."""
    return LibraryInventory(inventory_conn)
