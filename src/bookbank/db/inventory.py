# ABOUTME: Register and query books in the BookBank inventory database.
# ABOUTME: LibraryInventory also serves as the RegisteredIndex used for reconciliation.

import sqlite3

from bookbank.catalog.types import CatalogEntry
from bookbank.db.mapping import InventoryRecord, entry_to_row, row_to_record


class DuplicateEntryError(Exception):
    """Raised when registering a book whose ISBN is already in the inventory."""


class LibraryInventory:
    """Wraps a sqlite3 connection and provides typed access to the books table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def register(self, entry: CatalogEntry) -> int:
        """Store a catalog entry as a registered book.

        Returns:
            The row ID of the inserted book.

        Raises:
            DuplicateEntryError: If a book with this identifier already exists.
        """
        row = entry_to_row(entry)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)

        try:
            cursor = self._conn.execute(
                f"INSERT INTO books ({columns}) VALUES ({placeholders})",
                list(row.values()),
            )
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            if "UNIQUE constraint failed: books.isbn" in str(exc):
                raise DuplicateEntryError(
                    f"Book with identifier {entry.identifier} already registered"
                ) from exc
            raise

        return cursor.lastrowid  # type: ignore[return-value]

    def get_by_id(self, book_id: int) -> InventoryRecord | None:
        cursor = self._conn.execute("SELECT * FROM books WHERE id = ?", (book_id,))
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def get_by_isbn(self, isbn: str) -> InventoryRecord | None:
        cursor = self._conn.execute("SELECT * FROM books WHERE isbn = ?", (isbn,))
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def list_all(self) -> list[InventoryRecord]:
        """Return all registered books, most recently registered first."""
        cursor = self._conn.execute("SELECT * FROM books ORDER BY registered_at DESC, id DESC")
        return [row_to_record(row) for row in cursor.fetchall()]

    def contains_identifier(self, identifier: str) -> bool:
        cursor = self._conn.execute("SELECT 1 FROM books WHERE isbn = ? LIMIT 1", (identifier,))
        return cursor.fetchone() is not None

    def contains_title_author(self, title: str, author: str) -> bool:
        cursor = self._conn.execute(
            "SELECT 1 FROM books WHERE title = ? AND author = ? LIMIT 1",
            (title, author),
        )
        return cursor.fetchone() is not None
