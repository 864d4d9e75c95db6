# ABOUTME: SearchSession holds the accumulated, deduplicated results of one query.
# ABOUTME: Tracks per-lane page cursors and whether another page is worth fetching.

import uuid
from dataclasses import dataclass, field

from bookbank.catalog.types import CatalogEntry


@dataclass
class SearchSession:
    """Mutable state of one logical search.

    results keeps merge order and never holds two entries with the same
    identity key. Cursors name the last page fetched for each lane and only
    move forward. session_id lets callers drop late results belonging to a
    session they have already abandoned.
    """

    query_text: str
    results: list[CatalogEntry] = field(default_factory=list)
    title_page: int = 1
    author_page: int = 1
    can_load_more: bool = False
    is_loading_more: bool = False
    session_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    _seen_keys: set[tuple[str, ...]] = field(
        default_factory=set, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._seen_keys = {entry.identity_key for entry in self.results}

    def merge(self, *lanes: list[CatalogEntry]) -> int:
        """Append entries from each lane in order, skipping known identity keys.

        Returns the number of entries added.
        """
        added = 0
        for lane in lanes:
            for entry in lane:
                key = entry.identity_key
                if key in self._seen_keys:
                    continue
                self._seen_keys.add(key)
                self.results.append(entry)
                added += 1
        return added

    def __len__(self) -> int:
        return len(self.results)
