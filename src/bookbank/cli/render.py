# ABOUTME: Rich table rendering shared by the search and isbn commands.
# ABOUTME: Shows catalog entries with their release date and registration status.

from collections.abc import Sequence

from rich.table import Table

from bookbank.catalog.types import CatalogEntry
from bookbank.search.reconcile import RegisteredIndex, is_registered

RETRY_MESSAGE = "Could not reach the catalog. Please try again in a moment."


def entries_table(entries: Sequence[CatalogEntry], index: RegisteredIndex) -> Table:
    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Released")
    table.add_column("Price", justify="right")
    table.add_column("ISBN", style="dim")
    table.add_column("", width=10)

    for number, entry in enumerate(entries, start=1):
        status = "[green]registered[/green]" if is_registered(entry, index) else ""
        table.add_row(
            str(number),
            entry.title,
            entry.author or "[dim]unknown[/dim]",
            entry.raw_release_date or "?",
            f"¥{entry.price:,}" if entry.price else "-",
            entry.identifier,
            status,
        )
    return table
