# ABOUTME: Caller-side policy for ISBN/JAN lookups (barcode or typed code).
# ABOUTME: Turns an empty result into NoMatchError and auto-accepts a lone unregistered hit.

from dataclasses import dataclass

from bookbank.catalog.types import CatalogEntry
from bookbank.search.coordinator import SearchCoordinator
from bookbank.search.reconcile import RegisteredIndex, is_registered


class NoMatchError(Exception):
    """The identifier lookup succeeded but found nothing; offer manual entry."""

    def __init__(self, code: str) -> None:
        super().__init__(f"No catalog entry found for {code!r}")
        self.code = code


@dataclass
class IdentifierResolution:
    """Outcome of an identifier lookup.

    Attributes:
        entries: Everything the catalog returned, in catalog order.
        auto_accepted: The entry to register without asking, if the lookup
            returned exactly one entry that is not registered yet.
    """

    entries: list[CatalogEntry]
    auto_accepted: CatalogEntry | None = None


async def resolve_identifier(
    coordinator: SearchCoordinator, code: str, index: RegisteredIndex
) -> IdentifierResolution:
    """Look up a code and apply the auto-accept policy.

    Raises:
        NoMatchError: If the catalog returned no entries.
        CatalogFetchError: Propagated from the lookup itself.
    """
    entries = await coordinator.search_by_identifier(code)
    if not entries:
        raise NoMatchError(code)

    auto_accepted = None
    if len(entries) == 1 and not is_registered(entries[0], index):
        auto_accepted = entries[0]
    return IdentifierResolution(entries=entries, auto_accepted=auto_accepted)
