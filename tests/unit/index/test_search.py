"""Tests for substring search and result limiting."""

import pytest
from bobindex.index.search import SearchEngine
from bobindex.index.store import IndexStore


@pytest.fixture
def populated(store: IndexStore) -> IndexStore:
    """Store with three albums and one unrelated release."""
    store.upsert("/mp3/0102/Artist_C-Album-2012", "Artist_C-Album-2012")
    store.upsert("/mp3/0101/Artist_A-Album-2010", "Artist_A-Album-2010")
    store.upsert("/mp3/0101/Artist_B-Album-2011", "Artist_B-Album-2011")
    store.upsert("/mp3/0101/Artist_D-Single-2011", "Artist_D-Single-2011")
    return store


class TestSearch:
    """Tests for SearchEngine.search."""

    def test_returns_all_matches_ascending(self, populated: IndexStore) -> None:
        """Under a large limit every match is returned in ascending order."""
        result = SearchEngine(populated).search("album", 50)

        assert result.total == 3
        assert result.paths == (
            "/mp3/0101/Artist_A-Album-2010",
            "/mp3/0101/Artist_B-Album-2011",
            "/mp3/0102/Artist_C-Album-2012",
        )

    def test_limit_keeps_smallest_paths(self, populated: IndexStore) -> None:
        """A limit keeps the lexicographically smallest matches."""
        result = SearchEngine(populated).search("ALBUM", 2)

        assert result.total == 3
        assert result.paths == (
            "/mp3/0101/Artist_A-Album-2010",
            "/mp3/0101/Artist_B-Album-2011",
        )

    @pytest.mark.parametrize("limit", [0, 1, 3, 10])
    def test_result_size_is_min_of_limit_and_total(
        self, populated: IndexStore, limit: int
    ) -> None:
        """Returned size is min(limit, total) and total ignores the limit."""
        result = SearchEngine(populated).search("album", limit)

        assert result.total == 3
        assert len(result.paths) == min(limit, 3)

    def test_negative_limit_returns_nothing(self, populated: IndexStore) -> None:
        """A negative limit behaves like zero."""
        result = SearchEngine(populated).search("album", -1)
        assert result.paths == ()
        assert result.total == 3

    def test_no_match(self, populated: IndexStore) -> None:
        """No match is an empty result, not an error."""
        result = SearchEngine(populated).search("nothing-like-this", 50)
        assert result.total == 0
        assert result.paths == ()

    def test_to_dict(self, populated: IndexStore) -> None:
        """Results serialize to a plain dictionary."""
        data = SearchEngine(populated).search("single", 5).to_dict()
        assert data == {
            "query": "single",
            "limit": 5,
            "total": 1,
            "paths": ["/mp3/0101/Artist_D-Single-2011"],
        }
