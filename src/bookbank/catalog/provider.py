# ABOUTME: CatalogClient protocol defining the contract for catalog search sources.
# ABOUTME: The search coordinator depends on this, not on a concrete API client.

from typing import Protocol, runtime_checkable

from bookbank.catalog.types import CatalogEntry


@runtime_checkable
class CatalogClient(Protocol):
    """Protocol for field-scoped catalog searches.

    Title and author searches return one page (1-based) of relevance-ordered
    entries. Blank queries return an empty list without touching the network.
    """

    async def search_by_title(self, text: str, page: int = 1) -> list[CatalogEntry]: ...

    async def search_by_author(self, text: str, page: int = 1) -> list[CatalogEntry]: ...

    async def search_by_identifier(self, code: str) -> list[CatalogEntry]: ...
