# ABOUTME: The `bookbank isbn` command for looking up a book by ISBN or JAN code.
# ABOUTME: Auto-accepts a single unregistered hit and can register it straight away.

import asyncio
from pathlib import Path

import click
from rich.console import Console

from bookbank.catalog.http import CatalogFetchError
from bookbank.cli.options import app_id_option, db_option, open_catalog
from bookbank.cli.render import RETRY_MESSAGE, entries_table
from bookbank.db.connection import DEFAULT_DB_PATH, open_inventory
from bookbank.db.inventory import DuplicateEntryError, LibraryInventory
from bookbank.search.coordinator import SearchCoordinator
from bookbank.search.lookup import IdentifierResolution, NoMatchError, resolve_identifier
from bookbank.search.reconcile import RegisteredIndex

console = Console()


async def _resolve(code: str, app_id: str, index: RegisteredIndex) -> IdentifierResolution:
    async with open_catalog(app_id) as client:
        return await resolve_identifier(SearchCoordinator(client), code, index)


@click.command("isbn")
@click.argument("code")
@click.option(
    "--register",
    "do_register",
    is_flag=True,
    default=False,
    help="Register the book if the lookup finds exactly one new match.",
)
@app_id_option
@db_option
def isbn(code: str, do_register: bool, app_id: str, db_path: Path | None) -> None:
    """Look up a book by ISBN or JAN code (hyphens are ignored)."""
    conn = open_inventory(db_path or DEFAULT_DB_PATH)
    try:
        inventory = LibraryInventory(conn)
        try:
            resolution = asyncio.run(_resolve(code, app_id, inventory))
        except NoMatchError as exc:
            console.print(f"[yellow]No book found for {code}.[/yellow]")
            console.print("You can register it by hand with [bold]bookbank add[/bold].")
            raise SystemExit(1) from exc
        except CatalogFetchError as exc:
            console.print(f"[red]{RETRY_MESSAGE}[/red]")
            raise SystemExit(1) from exc

        console.print(entries_table(resolution.entries, inventory))

        accepted = resolution.auto_accepted
        if accepted is None:
            if len(resolution.entries) == 1:
                console.print("[dim]Already registered.[/dim]")
            return

        if not do_register:
            console.print("[dim]Run again with --register to add it to your inventory.[/dim]")
            return

        try:
            book_id = inventory.register(accepted)
        except DuplicateEntryError as exc:
            console.print(f"[yellow]{exc}[/yellow]")
            raise SystemExit(1) from exc
        console.print(f"[green]Registered[/green] {accepted.title} (id {book_id})")
    finally:
        conn.close()
