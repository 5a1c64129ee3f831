"""Substring search over indexed release names."""

import logging

from bobindex.index.models import SearchResult
from bobindex.index.store import IndexStore

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50


class SearchEngine:
    """Runs case-insensitive substring queries against the index.

    Args:
        store: Open index store.
    """

    def __init__(self, store: IndexStore) -> None:
        self._store = store

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> SearchResult:
        """Search for releases whose name contains ``query``.

        The store returns matches ordered by path descending. The result
        keeps the ``limit`` entries taken from the ascending end of that
        list, i.e. the lexicographically smallest matches, in ascending
        order. The total always counts every match.

        Args:
            query: Substring to look for, any casing.
            limit: Maximum number of paths to return.

        Returns:
            SearchResult with the selected paths and the total match count.

        Raises:
            IndexStoreError: If the query fails.
        """
        matches = self._store.find_substring(query)
        total = len(matches)

        selected: list[str] = []
        for i in range(min(max(limit, 0), total)):
            selected.append(matches[total - 1 - i])

        logger.debug("Search %r matched %d entries, returning %d", query, total, len(selected))
        return SearchResult(query=query, limit=limit, total=total, paths=tuple(selected))
