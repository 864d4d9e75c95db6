# ABOUTME: Converts raw catalog API records into CatalogEntry instances.
# ABOUTME: Handles field fallbacks for non-book media and mines page counts from descriptions.

import re
from typing import Any

from bookbank.catalog.types import CatalogEntry

# A number directly followed by the word for "pages", e.g. "320ページ".
_PAGE_COUNT_RE = re.compile(r"(\d+)\s?ページ")


def extract_page_count(text: str | None) -> int | None:
    """Pull a page count out of free-text description, if one is mentioned."""
    if not text:
        return None
    match = _PAGE_COUNT_RE.search(text)
    if not match:
        return None
    return int(match.group(1))


def _text(record: dict[str, Any], *keys: str) -> str:
    """First non-blank string among the given keys, stripped; "" if none."""
    for key in keys:
        value = record.get(key)
        if value is None:
            continue
        value = str(value).strip()
        if value:
            return value
    return ""


def _optional_text(record: dict[str, Any], key: str) -> str | None:
    return _text(record, key) or None


def _int(record: dict[str, Any], key: str) -> int:
    value = record.get(key)
    try:
        number = int(value)
    except (TypeError, ValueError):
        return 0
    return max(number, 0)


def _image_urls(record: dict[str, Any]) -> tuple[str, ...]:
    small = _text(record, "mediumImageUrl", "smallImageUrl")
    large = _text(record, "largeImageUrl")
    return tuple(url for url in (small, large) if url)


def normalize_entry(record: dict[str, Any]) -> CatalogEntry | None:
    """Map one raw catalog record to a CatalogEntry.

    Returns None when the record has no usable title. CDs and DVDs in the
    same catalog carry their creator in artistName and their publisher in
    label, so those serve as fallbacks for author and publisher.
    """
    title = _text(record, "title")
    if not title:
        return None

    description = _text(record, "itemCaption")

    return CatalogEntry(
        title=title,
        identifier=_text(record, "isbn", "jan"),
        author=_text(record, "author", "artistName"),
        publisher=_text(record, "publisherName", "label"),
        price=_int(record, "itemPrice"),
        raw_release_date=_text(record, "salesDate"),
        description=description,
        image_urls=_image_urls(record),
        size=_optional_text(record, "size"),
        series_name=_optional_text(record, "seriesName"),
        genre_code=_optional_text(record, "booksGenreId"),
        page_count=extract_page_count(description),
    )


def normalize_entries(records: list[dict[str, Any]]) -> list[CatalogEntry]:
    """Normalize a page of raw records, dropping any without a title."""
    entries = []
    for record in records:
        entry = normalize_entry(record)
        if entry is not None:
            entries.append(entry)
    return entries
