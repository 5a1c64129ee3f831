"""Index domain models.

This module defines the persisted release entry and the in-memory
result structures returned by the scan, clean and search operations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class WalkAction(str, Enum):
    """Decision taken for a directory visited during a scan.

    Attributes:
        DESCEND: Directory was indexed; its children are visited next.
        SKIP_SUBTREE: Directory is noise; neither it nor its children are indexed.
    """

    DESCEND = "descend"
    SKIP_SUBTREE = "skip_subtree"


@dataclass(frozen=True, slots=True)
class Entry:
    """A release directory recorded in the index.

    Attributes:
        path: Site-relative path (storage prefix stripped), unique key.
        display_name: Directory base name in its original casing.
        normalized_name: Lowercased display name used for matching.
    """

    path: str
    display_name: str
    normalized_name: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.normalized_name != self.display_name.lower():
            msg = f"Normalized name {self.normalized_name!r} does not match {self.display_name!r}"
            raise ValueError(msg)

    @classmethod
    def create(cls, path: str, display_name: str) -> "Entry":
        """Build an entry, deriving the normalized name."""
        return cls(path=path, display_name=display_name, normalized_name=display_name.lower())


@dataclass(frozen=True, slots=True)
class ScanError:
    """A directory that could not be listed during a scan.

    Attributes:
        path: Absolute path of the directory.
        message: Error description from the operating system.
    """

    path: str
    message: str


@dataclass(slots=True)
class ScanResult:
    """Statistics of a single scan run.

    Attributes:
        root: Absolute path of the scanned subtree.
        visited: Number of directories classified.
        created: Number of new index entries.
        pruned: Number of noise subtrees skipped.
        errors: Directories that could not be listed.
    """

    root: str
    visited: int = 0
    created: int = 0
    pruned: int = 0
    errors: list[ScanError] = field(default_factory=list)


@dataclass(slots=True)
class ReconcileResult:
    """Outcome of a reconciliation pass.

    Attributes:
        checked: Number of index entries whose directory was checked.
        removed: Paths whose directory no longer exists.
        unconfirmed: Paths retained because their existence could not be confirmed.
        dry_run: Whether removals were only reported.
    """

    checked: int = 0
    removed: list[str] = field(default_factory=list)
    unconfirmed: list[str] = field(default_factory=list)
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Result of a substring search.

    Attributes:
        query: Search string as given.
        limit: Maximum number of paths requested.
        total: Number of matching entries, independent of the limit.
        paths: Returned paths in ascending order.
    """

    query: str
    limit: int
    total: int
    paths: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "query": self.query,
            "limit": self.limit,
            "total": self.total,
            "paths": list(self.paths),
        }
