"""Index reconciliation against the filesystem.

Removes index entries whose release directory no longer exists. The
full path list is collected first and deletions happen only after all
existence checks are done, so the store is never modified while it is
being enumerated.
"""

import logging
import os
from pathlib import Path

from bobindex.index.models import ReconcileResult
from bobindex.index.store import IndexStore

logger = logging.getLogger(__name__)


class Reconciler:
    """Prunes entries whose backing directory has disappeared.

    Only a definite "does not exist" removes an entry. Any other stat
    failure (permission denied, I/O error) keeps the entry.

    Args:
        store: Open index store.
        site_root: Site root directory that entry paths are relative to.
    """

    def __init__(self, store: IndexStore, site_root: Path) -> None:
        self._store = store
        self._site_root = str(site_root).rstrip("/")

    def reconcile(self, *, dry_run: bool = False) -> ReconcileResult:
        """Check every indexed path and delete the missing ones.

        Args:
            dry_run: If True, report missing paths without deleting them.

        Returns:
            ReconcileResult listing removed and unconfirmed paths.

        Raises:
            IndexStoreError: If reading or writing the index fails.
        """
        result = ReconcileResult(dry_run=dry_run)

        paths = self._store.list_all_paths()
        for path in paths:
            result.checked += 1
            if self._is_missing(path, result):
                result.removed.append(path)

        if dry_run:
            for path in result.removed:
                logger.info("Dry-run: would delete %s", path)
            return result

        for path in result.removed:
            self._store.delete(path)

        logger.info("Checked %d entries, removed %d", result.checked, len(result.removed))
        return result

    def _is_missing(self, path: str, result: ReconcileResult) -> bool:
        """Check whether the directory behind an entry is definitely gone."""
        try:
            os.stat(self._site_root + path)
        except FileNotFoundError:
            return True
        except OSError as e:
            logger.warning("Cannot confirm %s, keeping entry: %s", path, e)
            result.unconfirmed.append(path)
        return False
