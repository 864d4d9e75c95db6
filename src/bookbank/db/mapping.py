# ABOUTME: Converts between CatalogEntry values and inventory table rows.
# ABOUTME: Empty identifiers become NULL; the release date is reduced to a year.

from dataclasses import dataclass
from typing import Any

from bookbank.catalog.dates import parse_release_date
from bookbank.catalog.types import CatalogEntry


@dataclass
class InventoryRecord:
    """A registered book as stored in the inventory."""

    id: int
    title: str
    author: str
    isbn: str | None
    publisher: str | None
    published_year: int | None
    price: int
    thumbnail_url: str | None
    page_count: int | None
    registered_at: str


def entry_to_row(entry: CatalogEntry) -> dict[str, Any]:
    """Convert a CatalogEntry to a dict suitable for INSERT."""
    released = parse_release_date(entry.raw_release_date)
    return {
        "title": entry.title,
        "author": entry.author,
        "isbn": entry.identifier or None,
        "publisher": entry.publisher or None,
        "published_year": released.year if released else None,
        "price": entry.price,
        "thumbnail_url": entry.thumbnail_url,
        "page_count": entry.page_count,
    }


def row_to_record(row: Any) -> InventoryRecord:
    """Convert a database row (dict-like) to an InventoryRecord."""
    return InventoryRecord(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        isbn=row["isbn"],
        publisher=row["publisher"],
        published_year=row["published_year"],
        price=row["price"],
        thumbnail_url=row["thumbnail_url"],
        page_count=row["page_count"],
        registered_at=row["registered_at"],
    )
