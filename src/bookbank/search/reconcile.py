# ABOUTME: Reconciles catalog entries against the user's registered inventory.
# ABOUTME: Decides "already registered" by identifier, or by (title, author) when there is none.

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from bookbank.catalog.types import CatalogEntry


@runtime_checkable
class RegisteredIndex(Protocol):
    """Read-only membership view over registered items."""

    def contains_identifier(self, identifier: str) -> bool: ...

    def contains_title_author(self, title: str, author: str) -> bool: ...


@dataclass(frozen=True)
class InMemoryRegisteredIndex:
    """A RegisteredIndex snapshot held in two sets."""

    identifiers: frozenset[str] = field(default_factory=frozenset)
    title_authors: frozenset[tuple[str, str]] = field(default_factory=frozenset)

    @classmethod
    def from_entries(cls, entries: Iterable[CatalogEntry]) -> "InMemoryRegisteredIndex":
        identifiers = set()
        title_authors = set()
        for entry in entries:
            if entry.identifier:
                identifiers.add(entry.identifier)
            title_authors.add((entry.title, entry.author))
        return cls(frozenset(identifiers), frozenset(title_authors))

    def contains_identifier(self, identifier: str) -> bool:
        return identifier in self.identifiers

    def contains_title_author(self, title: str, author: str) -> bool:
        return (title, author) in self.title_authors


def is_registered(entry: CatalogEntry, index: RegisteredIndex) -> bool:
    """Whether the entry is already in the inventory.

    An entry with an identifier is matched on the identifier alone, never on
    title and author. Only entries without one fall back to an exact
    (title, author) match.
    """
    if entry.identifier:
        return index.contains_identifier(entry.identifier)
    return index.contains_title_author(entry.title, entry.author)


def filter_unregistered(
    entries: Iterable[CatalogEntry], index: RegisteredIndex
) -> list[CatalogEntry]:
    """Drop registered entries, keeping the input order of the rest."""
    return [entry for entry in entries if not is_registered(entry, index)]
