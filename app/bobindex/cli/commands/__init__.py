"""CLI commands for bobindex.

This package contains all subcommand implementations.
"""

from bobindex.cli.commands import clean, config, entry, predir, scan, search

__all__ = ["clean", "config", "entry", "predir", "scan", "search"]
