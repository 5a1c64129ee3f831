"""Release directory scanner.

Walks a subtree of the site depth-first, in pre-order, and records
every release directory in the index. Noise directories (samples,
subtitles, disc splits, ...) are pruned: neither they nor anything
below them is indexed.
"""

import logging
import os
from pathlib import Path

from bobindex.index.filter import is_noise
from bobindex.index.models import ScanError, ScanResult, WalkAction
from bobindex.index.store import IndexStore

logger = logging.getLogger(__name__)


class ScanStartError(Exception):
    """Raised when the scan root cannot be walked at all."""


def normalize_sub_path(sub_path: str) -> str:
    """Return ``sub_path`` as "/a/b", or "" for the site root itself."""
    stripped = sub_path.strip("/")
    return f"/{stripped}" if stripped else ""


class ReleaseScanner:
    """Discovers release directories and upserts them into the index.

    Args:
        store: Open index store to write entries to.
        site_root: Site root directory; stripped from absolute paths
            to form the stored entry path.
    """

    def __init__(self, store: IndexStore, site_root: Path) -> None:
        self._store = store
        self._site_root = str(site_root).rstrip("/")

    def scan(self, sub_path: str = "") -> ScanResult:
        """Scan ``site_root + sub_path`` and index its release directories.

        Directories that cannot be listed are logged and skipped; the
        walk continues with their siblings.

        Args:
            sub_path: Subtree to scan, relative to the site root (e.g. "/mp3").
                Leading and trailing separators are optional; "" and "/"
                both scan the whole site.

        Returns:
            ScanResult with traversal statistics.

        Raises:
            ScanStartError: If the scan root does not exist or is not a directory.
            IndexStoreError: If writing to the index fails.
        """
        root = self._site_root + normalize_sub_path(sub_path)
        if not os.path.isdir(root):
            raise ScanStartError(f"Cannot walk {root}: not a directory")

        result = ScanResult(root=root)
        stack: list[str] = [root]

        while stack:
            directory = stack.pop()
            result.visited += 1

            if self._visit(directory, result) is WalkAction.SKIP_SUBTREE:
                result.pruned += 1
                continue

            children = self._list_subdirectories(directory, result)
            # Reversed so the lexicographically first child is popped next
            stack.extend(reversed(children))

        logger.info(
            "Scanned %s: %d directories, %d new entries, %d pruned",
            root,
            result.visited,
            result.created,
            result.pruned,
        )
        return result

    def index_path(self, directory: str) -> str:
        """Strip the site root from an absolute directory path."""
        if directory.startswith(self._site_root):
            return directory[len(self._site_root) :]
        return directory

    def _visit(self, directory: str, result: ScanResult) -> WalkAction:
        """Classify one directory and index it unless it is noise.

        Returns:
            SKIP_SUBTREE for noise, DESCEND otherwise.
        """
        path = self.index_path(directory)
        if is_noise(path):
            logger.debug("Skipping noise directory %s", path)
            return WalkAction.SKIP_SUBTREE

        # The site root itself is not a release
        if path and self._store.upsert(path, os.path.basename(directory)):
            result.created += 1
        return WalkAction.DESCEND

    def _list_subdirectories(self, directory: str, result: ScanResult) -> list[str]:
        """List real subdirectories of a directory in name order.

        Symlinks and regular files are ignored.
        """
        subdirs: list[str] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            subdirs.append(entry.path)
                    except OSError as e:
                        logger.warning("Cannot determine type of %s: %s", entry.path, e)
        except OSError as e:
            logger.warning("Cannot list directory %s: %s", directory, e)
            result.errors.append(ScanError(path=directory, message=str(e)))
            return []

        subdirs.sort()
        return subdirs
