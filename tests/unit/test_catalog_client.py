# ABOUTME: Unit tests for RakutenCatalogClient.
# ABOUTME: Uses a FakeHttpClient to check request shape, blank input, and response decoding.

import asyncio
from typing import Any

import pytest

from bookbank.catalog.client import PAGE_SIZE, RakutenCatalogClient, clean_identifier
from bookbank.catalog.http import DecodeError, HttpStatusError, TransportError
from bookbank.catalog.provider import CatalogClient
from tests.fixtures.rakuten_responses import (
    BOOK_SEARCH_RESPONSE,
    EMPTY_SEARCH_RESPONSE,
    UNTITLED_RECORD,
    make_record,
    make_response,
)


class FakeHttpClient:
    """Fake async HTTP client returning one canned body (or raising) for every request."""

    def __init__(self, response: Any = None) -> None:
        self._response = EMPTY_SEARCH_RESPONSE if response is None else response
        self.requests: list[tuple[str, dict[str, str]]] = []

    async def get(self, url: str, params: dict[str, str] | None = None) -> Any:
        self.requests.append((url, dict(params or {})))
        if isinstance(self._response, Exception):
            raise self._response
        return self._response


def _client(http: FakeHttpClient) -> RakutenCatalogClient:
    return RakutenCatalogClient(http, application_id="test-app")


class TestProtocol:
    def test_satisfies_catalog_client(self) -> None:
        assert isinstance(_client(FakeHttpClient()), CatalogClient)


class TestFieldSearch:
    """Tests for title and author lane requests."""

    def test_title_search_params(self) -> None:
        http = FakeHttpClient()
        asyncio.run(_client(http).search_by_title("  Python  ", 3))

        assert len(http.requests) == 1
        url, params = http.requests[0]
        assert "BooksBook/Search" in url
        assert params["title"] == "Python"
        assert "author" not in params
        assert params["page"] == "3"
        assert params["hits"] == str(PAGE_SIZE) == "30"
        assert params["sort"] == "standard"
        assert params["applicationId"] == "test-app"
        assert params["formatVersion"] == "2"
        assert params["outOfStockFlag"] == "1"

    def test_author_search_params(self) -> None:
        http = FakeHttpClient()
        asyncio.run(_client(http).search_by_author("村上春樹"))

        _, params = http.requests[0]
        assert params["author"] == "村上春樹"
        assert "title" not in params
        assert params["page"] == "1"

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_query_skips_network(self, text: str) -> None:
        http = FakeHttpClient()
        client = _client(http)
        assert asyncio.run(client.search_by_title(text, 1)) == []
        assert asyncio.run(client.search_by_author(text, 1)) == []
        assert http.requests == []

    def test_returns_normalized_entries(self) -> None:
        http = FakeHttpClient(BOOK_SEARCH_RESPONSE)
        entries = asyncio.run(_client(http).search_by_title("Python"))
        assert [e.identifier for e in entries] == ["9784873119328", "4988005000000"]

    def test_untitled_records_are_dropped(self) -> None:
        http = FakeHttpClient(make_response([make_record("1"), UNTITLED_RECORD]))
        entries = asyncio.run(_client(http).search_by_title("x"))
        assert [e.identifier for e in entries] == ["1"]


class TestIdentifierSearch:
    """Tests for ISBN/JAN lookups."""

    def test_strips_hyphens(self) -> None:
        http = FakeHttpClient(make_response([make_record("9784873119328")]))
        entries = asyncio.run(_client(http).search_by_identifier("978-4-87311-932-8"))

        url, params = http.requests[0]
        assert "BooksTotal/Search" in url
        assert params["isbnjan"] == "9784873119328"
        assert "page" not in params
        assert len(entries) == 1

    def test_only_hyphens_skips_network(self) -> None:
        http = FakeHttpClient()
        assert asyncio.run(_client(http).search_by_identifier("---")) == []
        assert http.requests == []

    def test_clean_identifier(self) -> None:
        assert clean_identifier(" 978-4-87311-932-8 ") == "9784873119328"


class TestErrors:
    """Fetch errors propagate; malformed bodies become DecodeError."""

    @pytest.mark.parametrize(
        "error",
        [TransportError("down"), HttpStatusError(500, "https://example.com")],
    )
    def test_transport_errors_propagate(self, error: Exception) -> None:
        http = FakeHttpClient(error)
        with pytest.raises(type(error)):
            asyncio.run(_client(http).search_by_title("Python"))

    @pytest.mark.parametrize(
        "body",
        [
            [],
            "not an object",
            {"count": 0},
            {"Items": "nope"},
            {"Items": [1, 2, 3]},
        ],
    )
    def test_unexpected_shape_raises_decode_error(self, body: Any) -> None:
        http = FakeHttpClient(body)
        with pytest.raises(DecodeError):
            asyncio.run(_client(http).search_by_author("Python"))
