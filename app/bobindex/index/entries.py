"""Single-entry add and delete.

Site hooks call these when a release directory is created or removed,
passing the parent path as seen inside the chroot (e.g. "/site/mp3/0101")
and the release name.
"""

from pathlib import Path

from bobindex.index.filter import is_noise
from bobindex.index.store import IndexStore

# Chroot-relative storage prefix of the site root
SITE_PREFIX = "/site"


def normalize_site_path(path: str, site_root: Path | None = None) -> str:
    """Strip the site storage prefix from a directory path.

    Both the absolute site root and the chroot-relative "/site" prefix
    are recognized, but only as whole leading segments. Trailing
    separators are removed.

    Args:
        path: Parent directory path as reported by the site.
        site_root: Absolute site root, if known.

    Returns:
        Site-relative path, e.g. "/mp3/0101", or "" for the site root.
    """
    prefixes = [SITE_PREFIX]
    if site_root is not None:
        prefixes.insert(0, str(site_root).rstrip("/"))

    for prefix in prefixes:
        if path == prefix or path.startswith(prefix + "/"):
            path = path[len(prefix) :]
            break

    return path.rstrip("/")


def build_entry_path(path: str, name: str, site_root: Path | None = None) -> str:
    """Build the stored entry path of a release inside a parent directory."""
    return f"{normalize_site_path(path, site_root)}/{name}"


def add_one(store: IndexStore, path: str, name: str, site_root: Path | None = None) -> bool:
    """Index one release directory unless it is noise.

    Args:
        store: Open index store.
        path: Parent directory of the release.
        name: Release directory name.
        site_root: Absolute site root, if known.

    Returns:
        True if a new entry was created. Noise directories and already
        indexed paths return False.

    Raises:
        IndexStoreError: If writing to the index fails.
    """
    entry_path = build_entry_path(path, name, site_root)
    if is_noise(entry_path):
        return False
    return store.upsert(entry_path, name)


def delete_one(store: IndexStore, path: str, name: str, site_root: Path | None = None) -> bool:
    """Remove one release from the index, regardless of classification.

    Returns:
        True if an entry was removed.

    Raises:
        IndexStoreError: If writing to the index fails.
    """
    return store.delete(build_entry_path(path, name, site_root))
