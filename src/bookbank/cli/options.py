# ABOUTME: Shared Click options and runtime helpers for BookBank CLI commands.
# ABOUTME: Provides --db and --app-id decorators and the catalog client factory.

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import click

from bookbank.catalog.client import RakutenCatalogClient
from bookbank.catalog.http import BookBankHttpClient
from bookbank.catalog.provider import CatalogClient
from bookbank.db.connection import DEFAULT_DB_PATH

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Path to inventory database (default: {DEFAULT_DB_PATH})",
)

app_id_option = click.option(
    "--app-id",
    "app_id",
    envvar="BOOKBANK_APP_ID",
    required=True,
    help="Rakuten application ID (or set BOOKBANK_APP_ID).",
)


@asynccontextmanager
async def open_catalog(app_id: str) -> AsyncIterator[CatalogClient]:
    """Yield a Rakuten catalog client, closing its HTTP connections afterwards."""
    async with BookBankHttpClient() as http_client:
        yield RakutenCatalogClient(http_client, application_id=app_id)
