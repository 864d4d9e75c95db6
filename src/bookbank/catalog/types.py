# ABOUTME: Core catalog data structures for books returned by the external catalog.
# ABOUTME: CatalogEntry is the interchange format between the API client, search, and inventory.

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntry:
    """A normalized record from the external book catalog.

    Entries are built fresh from each API response and never mutated; the
    search layer only compares, filters, and sorts them. Every field except
    title may be empty, since the upstream catalog is patchy about
    everything but the title.
    """

    title: str
    identifier: str = ""
    author: str = ""
    publisher: str = ""
    price: int = 0
    raw_release_date: str = ""
    description: str = ""
    image_urls: tuple[str, ...] = ()
    size: str | None = None
    series_name: str | None = None
    genre_code: str | None = None
    page_count: int | None = None

    @property
    def identity_key(self) -> tuple[str, ...]:
        """Deduplication key: the identifier, or (title, author) when it is empty."""
        if self.identifier:
            return (self.identifier,)
        return (self.title, self.author)

    @property
    def thumbnail_url(self) -> str | None:
        """Smallest available cover image, for list display."""
        return self.image_urls[0] if self.image_urls else None
