# ABOUTME: The `bookbank ls` command for listing registered books.
# ABOUTME: Displays a Rich table of everything in the inventory database.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from bookbank.cli.options import db_option
from bookbank.db.connection import DEFAULT_DB_PATH, open_inventory
from bookbank.db.inventory import LibraryInventory

console = Console()


@click.command("ls")
@db_option
def ls(db_path: Path | None) -> None:
    """List all registered books."""
    conn = open_inventory(db_path or DEFAULT_DB_PATH)
    try:
        records = LibraryInventory(conn).list_all()
    finally:
        conn.close()

    if not records:
        console.print("[yellow]No books registered yet.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Year", width=5)
    table.add_column("Price", justify="right")
    table.add_column("ISBN", style="dim")

    for record in records:
        table.add_row(
            str(record.id),
            record.title,
            record.author or "[dim]unknown[/dim]",
            str(record.published_year) if record.published_year else "?",
            f"¥{record.price:,}" if record.price else "-",
            record.isbn or "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} book(s)[/dim]")
