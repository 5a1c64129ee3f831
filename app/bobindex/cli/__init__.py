"""CLI package for bobindex.

This package contains the Typer application and all subcommands.
"""

from bobindex.cli.main import app

__all__ = ["app"]
