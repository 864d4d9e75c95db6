# ABOUTME: Search package: merging, paging, reconciling, and ordering catalog results.
# ABOUTME: Exports the coordinator, session, and the pure filter/sort helpers.

from bookbank.search.coordinator import SearchCoordinator
from bookbank.search.lookup import IdentifierResolution, NoMatchError, resolve_identifier
from bookbank.search.ordering import SortDirection, order_entries
from bookbank.search.reconcile import (
    InMemoryRegisteredIndex,
    RegisteredIndex,
    filter_unregistered,
    is_registered,
)
from bookbank.search.session import SearchSession

__all__ = [
    "IdentifierResolution",
    "InMemoryRegisteredIndex",
    "NoMatchError",
    "RegisteredIndex",
    "SearchCoordinator",
    "SearchSession",
    "SortDirection",
    "filter_unregistered",
    "is_registered",
    "order_entries",
    "resolve_identifier",
]
