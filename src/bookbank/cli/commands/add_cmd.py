# ABOUTME: The `bookbank add` command for registering a book by hand.
# ABOUTME: Used when the catalog has no match for a book the user owns.

from pathlib import Path

import click
from rich.console import Console

from bookbank.catalog.client import clean_identifier
from bookbank.catalog.types import CatalogEntry
from bookbank.cli.options import db_option
from bookbank.db.connection import DEFAULT_DB_PATH, open_inventory
from bookbank.db.inventory import DuplicateEntryError, LibraryInventory
from bookbank.search.reconcile import is_registered

console = Console()


@click.command("add")
@click.argument("title")
@click.option("--author", default="", help="Author name.")
@click.option("--isbn", "isbn_code", default="", help="ISBN or JAN code.")
@click.option("--publisher", default="", help="Publisher name.")
@click.option("--price", type=click.IntRange(min=0), default=0, help="List price in yen.")
@click.option("--released", default="", help="Release date, e.g. 2012年09月07日.")
@db_option
def add(
    title: str,
    author: str,
    isbn_code: str,
    publisher: str,
    price: int,
    released: str,
    db_path: Path | None,
) -> None:
    """Register a book by hand."""
    title = title.strip()
    if not title:
        console.print("[red]A title is required.[/red]")
        raise SystemExit(1)

    entry = CatalogEntry(
        title=title,
        identifier=clean_identifier(isbn_code),
        author=author.strip(),
        publisher=publisher.strip(),
        price=price,
        raw_release_date=released.strip(),
    )

    conn = open_inventory(db_path or DEFAULT_DB_PATH)
    try:
        inventory = LibraryInventory(conn)
        if is_registered(entry, inventory):
            console.print(f"[yellow]{entry.title} is already registered.[/yellow]")
            raise SystemExit(1)
        try:
            book_id = inventory.register(entry)
        except DuplicateEntryError as exc:
            console.print(f"[yellow]{exc}[/yellow]")
            raise SystemExit(1) from exc
        console.print(f"[green]Registered[/green] {entry.title} (id {book_id})")
    finally:
        conn.close()
