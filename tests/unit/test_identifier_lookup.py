# ABOUTME: Unit tests for the identifier lookup policy used by barcode and ISBN entry.
# ABOUTME: Covers NoMatch, auto-accepting a single new hit, and declining registered ones.

import asyncio

import pytest

from bookbank.catalog.http import TransportError
from bookbank.search.coordinator import SearchCoordinator
from bookbank.search.lookup import NoMatchError, resolve_identifier
from bookbank.search.reconcile import InMemoryRegisteredIndex
from tests.fixtures.fakes import FakeCatalogClient, entry

ISBN = "9784000000000"


def _resolve(client: FakeCatalogClient, code: str, index: InMemoryRegisteredIndex):
    return asyncio.run(resolve_identifier(SearchCoordinator(client), code, index))


class TestResolveIdentifier:
    def test_single_unregistered_hit_is_auto_accepted(self) -> None:
        client = FakeCatalogClient(identifier_results={ISBN: [entry(ISBN)]})
        resolution = _resolve(client, "978-4000000000", InMemoryRegisteredIndex())
        assert resolution.auto_accepted == entry(ISBN)
        assert resolution.entries == [entry(ISBN)]

    def test_single_registered_hit_is_not_accepted(self) -> None:
        client = FakeCatalogClient(identifier_results={ISBN: [entry(ISBN)]})
        index = InMemoryRegisteredIndex(identifiers=frozenset({ISBN}))
        resolution = _resolve(client, ISBN, index)
        assert resolution.auto_accepted is None
        assert len(resolution.entries) == 1

    def test_multiple_hits_need_a_choice(self) -> None:
        client = FakeCatalogClient(identifier_results={ISBN: [entry(ISBN), entry("other")]})
        resolution = _resolve(client, ISBN, InMemoryRegisteredIndex())
        assert resolution.auto_accepted is None
        assert len(resolution.entries) == 2

    def test_no_results_raise_no_match(self) -> None:
        client = FakeCatalogClient()
        with pytest.raises(NoMatchError) as exc_info:
            _resolve(client, ISBN, InMemoryRegisteredIndex())
        assert exc_info.value.code == ISBN

    def test_blank_code_raises_no_match(self) -> None:
        with pytest.raises(NoMatchError):
            _resolve(FakeCatalogClient(), "--", InMemoryRegisteredIndex())

    def test_fetch_errors_are_not_no_match(self) -> None:
        client = FakeCatalogClient(identifier_results={ISBN: TransportError("down")})
        with pytest.raises(TransportError):
            _resolve(client, ISBN, InMemoryRegisteredIndex())
