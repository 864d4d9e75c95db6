# ABOUTME: The `bookbank search` command for finding books in the Rakuten catalog.
# ABOUTME: Runs the title/author lanes, pages through results, and marks registered books.

import asyncio
import logging
from pathlib import Path

import click
from rich.console import Console

from bookbank.catalog.http import CatalogFetchError
from bookbank.cli.options import app_id_option, db_option, open_catalog
from bookbank.cli.render import RETRY_MESSAGE, entries_table
from bookbank.db.connection import DEFAULT_DB_PATH, open_inventory
from bookbank.db.inventory import LibraryInventory
from bookbank.search.coordinator import SearchCoordinator
from bookbank.search.ordering import SortDirection, order_entries
from bookbank.search.reconcile import filter_unregistered
from bookbank.search.session import SearchSession

logger = logging.getLogger(__name__)

console = Console()


async def _collect(query: str, pages: int, app_id: str) -> SearchSession | None:
    """Run a search and keep loading pages until `pages` or the catalog runs out."""
    async with open_catalog(app_id) as client:
        coordinator = SearchCoordinator(client)
        session = await coordinator.search(query)
        if session is None:
            return None
        while session.can_load_more and session.title_page < pages:
            await coordinator.load_more(session)
        return session


@click.command("search")
@click.argument("query")
@click.option(
    "--pages",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Maximum number of result pages to load.",
)
@click.option(
    "--sort",
    "sort_order",
    type=click.Choice(["relevance", "newest", "oldest"]),
    default="relevance",
    show_default=True,
    help="Result order. Books without a release date always come last.",
)
@click.option(
    "--unregistered-only",
    is_flag=True,
    default=False,
    help="Hide books that are already in the inventory.",
)
@app_id_option
@db_option
def search(
    query: str,
    pages: int,
    sort_order: str,
    unregistered_only: bool,
    app_id: str,
    db_path: Path | None,
) -> None:
    """Search the catalog by title and author."""
    if not query.strip():
        console.print("[yellow]Enter something to search for.[/yellow]")
        return

    try:
        session = asyncio.run(_collect(query, pages, app_id))
    except CatalogFetchError as exc:
        logger.warning("Search for %r failed: %s", query, exc)
        console.print(f"[red]{RETRY_MESSAGE}[/red]")
        raise SystemExit(1) from exc

    conn = open_inventory(db_path or DEFAULT_DB_PATH)
    try:
        inventory = LibraryInventory(conn)
        entries = session.results if session else []
        if unregistered_only:
            entries = filter_unregistered(entries, inventory)
        if sort_order != "relevance":
            entries = order_entries(entries, SortDirection(sort_order))

        if not entries:
            console.print("[yellow]No results found.[/yellow]")
            return

        console.print(entries_table(entries, inventory))
        footer = f"{len(entries)} result(s)"
        if session and session.can_load_more:
            footer += f" - more available, try --pages {session.title_page + 1}"
        console.print(f"\n[dim]{footer}[/dim]")
    finally:
        conn.close()
