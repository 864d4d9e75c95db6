# ABOUTME: Orchestrates concurrent title and author searches into a single result session.
# ABOUTME: Merges and deduplicates both lanes and pages through further results on demand.

import asyncio
import logging

from bookbank.catalog.client import PAGE_SIZE
from bookbank.catalog.http import CatalogFetchError
from bookbank.catalog.provider import CatalogClient
from bookbank.catalog.types import CatalogEntry
from bookbank.search.session import SearchSession

logger = logging.getLogger(__name__)


def _has_more(title_page: list[CatalogEntry], author_page: list[CatalogEntry]) -> bool:
    # Either lane returning a full page is enough to keep paging.
    return len(title_page) >= PAGE_SIZE or len(author_page) >= PAGE_SIZE


class SearchCoordinator:
    """Runs the title and author lanes against a CatalogClient and merges them.

    Title hits always precede author hits that are not also title hits.
    Both lanes of a page are awaited together; nothing is merged until both
    have answered.
    """

    def __init__(self, client: CatalogClient) -> None:
        self._client = client

    async def _fetch_lanes(
        self, query: str, title_page: int, author_page: int
    ) -> tuple[list[CatalogEntry], list[CatalogEntry]]:
        outcomes = await asyncio.gather(
            self._client.search_by_title(query, title_page),
            self._client.search_by_author(query, author_page),
            return_exceptions=True,
        )
        # Both lanes have settled here; surface the first failure, if any.
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        title_results, author_results = outcomes
        return title_results, author_results

    async def search(self, query_text: str) -> SearchSession | None:
        """Start a new search and return its first page.

        Returns None for a blank query. Any lane failure propagates as the
        original CatalogFetchError and no session is produced.
        """
        query = query_text.strip()
        if not query:
            return None

        title_results, author_results = await self._fetch_lanes(query, 1, 1)

        session = SearchSession(query_text=query)
        session.merge(title_results, author_results)
        session.can_load_more = _has_more(title_results, author_results)
        logger.debug(
            "Search %r: %d title, %d author, %d merged",
            query,
            len(title_results),
            len(author_results),
            len(session),
        )
        return session

    async def load_more(self, session: SearchSession) -> SearchSession:
        """Fetch the next page of both lanes and append it to the session.

        MUTATES session in place and returns it. A lane failure stops further
        paging (can_load_more becomes False) but keeps every result already
        collected; the error is logged, not raised. Calls on a session that
        is exhausted or already loading are no-ops.
        """
        if not session.can_load_more or session.is_loading_more:
            logger.debug(
                "Skipping load_more for %s (can_load_more=%s, is_loading_more=%s)",
                session.session_id,
                session.can_load_more,
                session.is_loading_more,
            )
            return session

        session.is_loading_more = True
        session.title_page += 1
        session.author_page += 1
        try:
            title_results, author_results = await self._fetch_lanes(
                session.query_text, session.title_page, session.author_page
            )
        except CatalogFetchError as exc:
            logger.warning(
                "Loading page %d for %r failed, stopping pagination: %s",
                session.title_page,
                session.query_text,
                exc,
            )
            session.can_load_more = False
            return session
        finally:
            session.is_loading_more = False

        added = session.merge(title_results, author_results)
        session.can_load_more = _has_more(title_results, author_results)
        logger.debug(
            "Page %d for %r added %d entries", session.title_page, session.query_text, added
        )
        return session

    async def search_by_identifier(self, code: str) -> list[CatalogEntry]:
        """Look up entries by ISBN/JAN; the client owns cleaning the code."""
        return await self._client.search_by_identifier(code)
