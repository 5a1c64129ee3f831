"""Admission gate for new release names.

Used by site hooks before a directory is created: a release that is
already indexed is denied.
"""

from bobindex.index.store import IndexStore

# predir exit status when the name is already indexed
EXIT_FOUND = 2


class AdmissionGate:
    """Yes/no existence check for a release name."""

    def __init__(self, store: IndexStore) -> None:
        self._store = store

    def exists(self, name: str, case_sensitive: bool = False) -> bool:
        """Check whether a release with this exact name is indexed."""
        return self._store.find_exact(name, case_sensitive) is not None
