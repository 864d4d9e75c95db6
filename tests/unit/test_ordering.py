# ABOUTME: Unit tests for release-date ordering of catalog entries.
# ABOUTME: Checks both directions and that undated entries always sink, keeping input order.

import pytest

from bookbank.search.ordering import SortDirection, order_entries
from tests.fixtures.fakes import entry

DATED_OLD = entry("old", raw_release_date="2001年01月01日")
DATED_MID = entry("mid", raw_release_date="2010年06月")
DATED_NEW = entry("new", raw_release_date="2020年12月24日")
UNDATED_A = entry("undated-a", raw_release_date="")
UNDATED_B = entry("undated-b", raw_release_date="未定")


def _ids(entries: list) -> list[str]:
    return [e.identifier for e in entries]


class TestOrderEntries:
    def test_newest_first(self) -> None:
        result = order_entries([DATED_OLD, DATED_NEW, DATED_MID], SortDirection.NEWEST_FIRST)
        assert _ids(result) == ["new", "mid", "old"]

    def test_oldest_first(self) -> None:
        result = order_entries([DATED_NEW, DATED_OLD, DATED_MID], SortDirection.OLDEST_FIRST)
        assert _ids(result) == ["old", "mid", "new"]

    @pytest.mark.parametrize("direction", list(SortDirection))
    def test_dated_before_undated_in_both_directions(self, direction: SortDirection) -> None:
        assert _ids(order_entries([UNDATED_A, DATED_OLD], direction)) == ["old", "undated-a"]
        assert _ids(order_entries([DATED_OLD, UNDATED_A], direction)) == ["old", "undated-a"]

    @pytest.mark.parametrize("direction", list(SortDirection))
    def test_undated_keep_input_order(self, direction: SortDirection) -> None:
        result = order_entries([UNDATED_B, DATED_MID, UNDATED_A, DATED_NEW], direction)
        assert _ids(result)[2:] == ["undated-b", "undated-a"]

    def test_equal_dates_are_stable(self) -> None:
        first = entry("first", raw_release_date="2015年")
        second = entry("second", raw_release_date="2015年01月01日")
        result = order_entries([first, second], SortDirection.NEWEST_FIRST)
        assert _ids(result) == ["first", "second"]

    def test_edition_number_does_not_inflate_year(self) -> None:
        edition = entry("edition", raw_release_date="第3版 2010年")
        dated = entry("dated", raw_release_date="2020年01月01日")
        result = order_entries([edition, dated], SortDirection.NEWEST_FIRST)
        assert _ids(result) == ["dated", "edition"]

    def test_does_not_mutate_input(self) -> None:
        entries = [DATED_OLD, DATED_NEW]
        order_entries(entries, SortDirection.NEWEST_FIRST)
        assert _ids(entries) == ["old", "new"]

    def test_empty(self) -> None:
        assert order_entries([], SortDirection.OLDEST_FIRST) == []

    def test_direction_values(self) -> None:
        assert SortDirection("newest") is SortDirection.NEWEST_FIRST
        assert SortDirection("oldest") is SortDirection.OLDEST_FIRST
