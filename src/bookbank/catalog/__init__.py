# ABOUTME: Catalog package: talking to the external book catalog and shaping its records.
# ABOUTME: Exports CatalogEntry, the client protocol, and the fetch error taxonomy.

from bookbank.catalog.client import PAGE_SIZE, RakutenCatalogClient
from bookbank.catalog.dates import parse_release_date
from bookbank.catalog.http import (
    BookBankHttpClient,
    CatalogFetchError,
    DecodeError,
    HttpStatusError,
    TransportError,
)
from bookbank.catalog.normalizer import normalize_entry
from bookbank.catalog.provider import CatalogClient
from bookbank.catalog.types import CatalogEntry

__all__ = [
    "PAGE_SIZE",
    "BookBankHttpClient",
    "CatalogClient",
    "CatalogEntry",
    "CatalogFetchError",
    "DecodeError",
    "HttpStatusError",
    "RakutenCatalogClient",
    "TransportError",
    "normalize_entry",
    "parse_release_date",
]
