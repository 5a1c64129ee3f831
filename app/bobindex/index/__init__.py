"""Release index module.

This module provides noise classification, the SQLite index store and
the scan, clean, search and admission operations built on top of it.
"""

from bobindex.index.entries import add_one, delete_one, normalize_site_path
from bobindex.index.filter import is_noise
from bobindex.index.gate import AdmissionGate
from bobindex.index.models import (
    Entry,
    ReconcileResult,
    ScanError,
    ScanResult,
    SearchResult,
    WalkAction,
)
from bobindex.index.reconciler import Reconciler
from bobindex.index.scanner import ReleaseScanner, ScanStartError
from bobindex.index.search import SearchEngine
from bobindex.index.store import IndexStore, IndexStoreError

__all__ = [
    "AdmissionGate",
    "Entry",
    "IndexStore",
    "IndexStoreError",
    "ReconcileResult",
    "Reconciler",
    "ReleaseScanner",
    "ScanError",
    "ScanResult",
    "ScanStartError",
    "SearchEngine",
    "SearchResult",
    "WalkAction",
    "add_one",
    "delete_one",
    "is_noise",
    "normalize_site_path",
]
