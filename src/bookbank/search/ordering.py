# ABOUTME: Sorts catalog entries by their parsed release date.
# ABOUTME: Entries without a readable date always sink to the bottom, in either direction.

from collections.abc import Iterable
from enum import Enum

from bookbank.catalog.dates import parse_release_date
from bookbank.catalog.types import CatalogEntry


class SortDirection(Enum):
    NEWEST_FIRST = "newest"
    OLDEST_FIRST = "oldest"


def order_entries(
    entries: Iterable[CatalogEntry], direction: SortDirection
) -> list[CatalogEntry]:
    """Return entries sorted by release date in the given direction.

    Dated entries come before undated ones regardless of direction. Undated
    entries keep their input order (the sort is stable), as do entries with
    equal dates. Each date is parsed once per call.
    """
    newest_first = direction is SortDirection.NEWEST_FIRST

    def sort_key(entry: CatalogEntry) -> tuple[bool, int]:
        released = parse_release_date(entry.raw_release_date)
        if released is None:
            return (True, 0)
        ordinal = released.toordinal()
        return (False, -ordinal if newest_first else ordinal)

    return sorted(entries, key=sort_key)
