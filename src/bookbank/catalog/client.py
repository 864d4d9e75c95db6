# ABOUTME: Rakuten Books catalog client implementation.
# ABOUTME: Issues one title-, author-, or ISBN/JAN-scoped query and returns normalized entries.

import logging
from typing import Any

from bookbank.catalog.http import DecodeError, HttpClient
from bookbank.catalog.normalizer import normalize_entries
from bookbank.catalog.types import CatalogEntry

logger = logging.getLogger(__name__)

_BOOK_SEARCH_URL = "https://app.rakuten.co.jp/services/api/BooksBook/Search/20170404"
_TOTAL_SEARCH_URL = "https://app.rakuten.co.jp/services/api/BooksTotal/Search/20170404"

PAGE_SIZE = 30


def clean_identifier(code: str) -> str:
    """Strip hyphens and surrounding whitespace from an ISBN/JAN code."""
    return code.replace("-", "").strip()


def _extract_items(data: Any, url: str) -> list[dict[str, Any]]:
    """Pull the record list out of a formatVersion=2 response body."""
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object from {url}, got {type(data).__name__}")
    items = data.get("Items")
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise DecodeError(f"Missing or malformed 'Items' in response from {url}")
    return items


class RakutenCatalogClient:
    """Catalog client backed by the Rakuten Books web service.

    Stateless between calls; every method issues at most one request through
    the injected HttpClient, whose errors propagate unchanged.
    """

    def __init__(self, http_client: HttpClient, application_id: str) -> None:
        self._http = http_client
        self._application_id = application_id

    def _base_params(self) -> dict[str, str]:
        return {
            "applicationId": self._application_id,
            "format": "json",
            "formatVersion": "2",
            "outOfStockFlag": "1",
        }

    async def search_by_title(self, text: str, page: int = 1) -> list[CatalogEntry]:
        return await self._search_field("title", text, page)

    async def search_by_author(self, text: str, page: int = 1) -> list[CatalogEntry]:
        return await self._search_field("author", text, page)

    async def search_by_identifier(self, code: str) -> list[CatalogEntry]:
        """Look up entries by ISBN or JAN code. Hyphens are ignored."""
        clean = clean_identifier(code)
        if not clean:
            return []
        params = self._base_params()
        params["isbnjan"] = clean
        return await self._fetch(_TOTAL_SEARCH_URL, params)

    async def _search_field(self, field: str, text: str, page: int) -> list[CatalogEntry]:
        query = text.strip()
        if not query:
            return []
        params = self._base_params()
        params.update(
            {
                field: query,
                "hits": str(PAGE_SIZE),
                "page": str(page),
                "sort": "standard",
            }
        )
        return await self._fetch(_BOOK_SEARCH_URL, params)

    async def _fetch(self, url: str, params: dict[str, str]) -> list[CatalogEntry]:
        safe_params = {k: v for k, v in params.items() if k != "applicationId"}
        logger.debug("Catalog request %s %s", url, safe_params)
        data = await self._http.get(url, params=params)
        entries = normalize_entries(_extract_items(data, url))
        logger.debug("Catalog returned %d entries", len(entries))
        return entries
